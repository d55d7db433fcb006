# Config flags and runtime settings

import os

from dotenv import load_dotenv

load_dotenv()

CONFIG = {
    # Local JSON store for day -> events
    "storage": {
        "path": os.getenv("MONTHPAD_DATA_PATH", "data/calendar_events.json"),
        "lock_timeout_s": float(os.getenv("MONTHPAD_LOCK_TIMEOUT", "3.0")),
    },

    "logging": {
        "level": os.getenv("MONTHPAD_LOG_LEVEL", "WARNING"),
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },

    # CLI month view: today is shown as [dd], days with events get the marker
    "display": {
        "event_marker": "*",
    },
}
