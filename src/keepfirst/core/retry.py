"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/retry.py
Re-issues blocking I/O calls that were interrupted by a signal (EINTR).
"""

import logging
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def retry_on_interrupt(operation: Callable[..., T], *args, **kwargs) -> T:
    """
    Calls operation(*args, **kwargs) until it stops raising InterruptedError.

    Any other exception propagates unchanged on the first occurrence.
    There is no retry limit: an interrupted call is always safe to re-issue.
    """
    while True:
        try:
            return operation(*args, **kwargs)
        except InterruptedError:
            logger.debug(f"Interrupted call to {getattr(operation, '__name__', operation)}, retrying")
            continue
