"""
Thread-safe rate-limited logging utilities.

Used by long-running polls so that a transaction stuck in the same status
does not flood the log with identical warnings.
"""
import logging
import threading
import time
from typing import Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

# Keys expire after an hour at most; per-call intervals are enforced via the stored timestamps
_log_cache: TTLCache = TTLCache(maxsize=256, ttl=3600)
_log_cache_lock = threading.RLock()


def rate_limited_log(
    message: str,
    level: str = "warning",
    interval: float = 60,
    logger_instance: Optional[logging.Logger] = None,
    key: Optional[str] = None,
    now: Optional[float] = None
) -> bool:
    """
    Log a message at most once per ``interval`` seconds, in a thread-safe manner.

    Args:
        message: Message to log
        level: Log level (debug, info, warning, error, critical)
        interval: Minimum interval between identical logs in seconds
        logger_instance: Logger to use (defaults to module logger)
        key: Rate limiting key (defaults to level and message)
        now: Current monotonic time, for tests

    Returns:
        True if the message was logged, False if it was suppressed
    """
    log_instance = logger_instance or logger
    log_method = getattr(log_instance, level.lower(), log_instance.warning)

    cache_key = key or f"{level}:{message}"
    current = time.monotonic() if now is None else now

    with _log_cache_lock:
        last_logged = _log_cache.get(cache_key)
        if last_logged is not None and current - last_logged < interval:
            return False
        _log_cache[cache_key] = current

    log_method(message)
    return True


def reset_rate_limits() -> None:
    """Forget all rate limiting state."""
    with _log_cache_lock:
        _log_cache.clear()
