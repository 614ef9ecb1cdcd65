"""Bounded-time execution of a blocking callable."""

import threading
import time
from collections.abc import Callable
from typing import Any, TypeVar

from ..utils.logging_utils import get_logger
from .exceptions import ExportTimeoutError

T = TypeVar("T")

logger = get_logger(__name__)


def run_with_deadline(
    func: Callable[..., T], timeout: float | None, *args: Any, **kwargs: Any
) -> T:
    """Run ``func`` and give up once ``timeout`` seconds have elapsed.

    The call runs in a daemon thread. When the deadline passes the thread
    is abandoned: whatever request or write it is in the middle of is not
    cancelled, and it does not keep the process alive on exit.

    Args:
        func: Callable to run
        timeout: Deadline in seconds, or None to run inline without a limit
        *args: Positional arguments for ``func``
        **kwargs: Keyword arguments for ``func``

    Returns:
        Whatever ``func`` returns

    Raises:
        ExportTimeoutError: If the deadline elapses first
        Exception: Any exception raised by ``func``, unchanged
    """
    if timeout is None:
        return func(*args, **kwargs)

    outcome: dict[str, Any] = {}

    def target() -> None:
        try:
            outcome["result"] = func(*args, **kwargs)
        except BaseException as e:  # re-raised in the calling thread
            outcome["error"] = e

    worker = threading.Thread(
        target=target, name=f"deadline-{getattr(func, '__name__', 'call')}", daemon=True
    )
    started = time.monotonic()
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        logger.warning(
            f"Abandoning run after {timeout:g}s deadline",
            extra={"duration": time.monotonic() - started},
        )
        raise ExportTimeoutError(timeout)

    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]
