"""Record id generation."""
import threading
import time

_lock = threading.Lock()
_last_issued = 0


def new_id() -> str:
    """
    Returns the current time in milliseconds as a decimal string.

    Ids are strictly increasing within a process: if the clock has not moved
    past the last issued value, the last value plus one is used instead.
    """
    global _last_issued
    with _lock:
        candidate = time.time_ns() // 1_000_000
        if candidate <= _last_issued:
            candidate = _last_issued + 1
        _last_issued = candidate
        return str(candidate)
