"""
Timeout utilities
"""

from threading import Thread
from typing import Any, Callable, Optional


def with_timeout(fn: Callable[..., Any], seconds: Optional[float], *args, **kwargs) -> Any:
    if seconds is None or seconds <= 0:
        return fn(*args, **kwargs)

    outcome = {}

    def _run():
        try:
            outcome["result"] = fn(*args, **kwargs)
        except BaseException as e:
            outcome["error"] = e

    # daemon: an abandoned call must not hold the interpreter open at exit
    th = Thread(target=_run, name=f"timeout-{getattr(fn, '__name__', 'call')}", daemon=True)
    th.start()
    th.join(seconds)

    if th.is_alive():
        raise TimeoutError(f"Operation exceeded {seconds} seconds")
    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]
