"""Retry policy for calls to external fact providers.

One retry after a fixed short delay. No backoff, no circuit breaker.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import requests
import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 2
    delay: float = 0.2
    retry_on: tuple[type[BaseException], ...] = (requests.RequestException,)
    sleep: Callable[[float], Any] = time.sleep

    def call(self, fn: Callable[[], Any], description: str = "call") -> Any:
        """Invoke ``fn``, retrying on transport failures.

        The exception from the final attempt propagates unmodified.
        """
        attempt = 1
        while True:
            try:
                return fn()
            except self.retry_on as exc:
                if attempt >= self.max_attempts:
                    logger.error(
                        "External call failed, giving up",
                        call=description,
                        attempts=attempt,
                        error=str(exc),
                    )
                    raise
                logger.warning(
                    "External call failed, retrying",
                    call=description,
                    attempt=attempt,
                    delay=self.delay,
                    error=str(exc),
                )
                self.sleep(self.delay)
                attempt += 1
