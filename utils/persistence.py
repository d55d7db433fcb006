# JSON file helpers: lock-file guarded, atomic writes

from __future__ import annotations
from pathlib import Path
import json
import os
import time
from typing import Any

from utils.config import CONFIG


# Naive lock via .lock file (single-user local use)
def _lock_path(p: Path) -> Path:
    return p.with_suffix(p.suffix + ".lock")


def _acquire_lock(p: Path, timeout: float | None = None, poll: float = 0.05) -> None:
    if timeout is None:
        timeout = CONFIG["storage"]["lock_timeout_s"]
    lock = _lock_path(p)
    start = time.monotonic()
    while True:
        try:
            # O_EXCL so two writers can't both see "no lock" and proceed
            fd = os.open(lock, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        except FileExistsError:
            if time.monotonic() - start > timeout:
                raise TimeoutError(f"Could not acquire lock for {p}")
            time.sleep(poll)
            continue
        os.close(fd)
        return


def _release_lock(p: Path) -> None:
    try:
        _lock_path(p).unlink()
    except FileNotFoundError:
        pass


def load_json(path: str | Path, default: Any) -> Any:
    """Read JSON from path; returns default when the file doesn't exist."""
    p = Path(path)
    if not p.exists():
        return default
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_json(path: str | Path, data: Any, timeout: float | None = None) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    _acquire_lock(p, timeout=timeout)
    try:
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp, p)
    finally:
        _release_lock(p)
