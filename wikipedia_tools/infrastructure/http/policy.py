"""
Retry/backoff policy for the HTTP transport.

Centralizes retry classification and backoff timing so the transport stays thin
and the Wikipedia service never micromanages transient failures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional
import random

import httpx


Classifier = Callable[[BaseException], bool]


def _default_status_codes() -> List[int]:
    # HTTP 5xx server errors, 429 rate limit, 408 timeout
    return [500, 502, 503, 504, 429, 408]


@dataclass
class RetryPolicy:
    max_retries: int = 3
    backoff_base_s: float = 0.5
    backoff_max_s: float = 8.0
    jitter_ratio: float = 0.1  # +- 10% jitter
    retryable_status_codes: List[int] = field(default_factory=_default_status_codes)
    classify_exception: Optional[Classifier] = None

    def should_retry(self, exc: BaseException, attempt_index: int) -> bool:
        """
        Return True when we should retry the given exception.
        attempt_index is zero-based (0 == first retry attempt).
        """
        if attempt_index >= max(0, int(self.max_retries)):
            return False
        cls = self.classify_exception or _default_exception_classifier
        return bool(cls(exc))

    def should_retry_status(self, status: int, attempt_index: int) -> bool:
        if attempt_index >= max(0, int(self.max_retries)):
            return False
        return status in self.retryable_status_codes

    def backoff_seconds(self, attempt_index: int) -> float:
        """
        Exponential backoff with optional jitter; attempt_index is zero-based.
        0 -> base, 1 -> base*2, 2 -> base*4, ... up to max.
        """
        base = max(0.0, float(self.backoff_base_s))
        cap = max(base, float(self.backoff_max_s))
        dur = min(cap, base * (2 ** attempt_index))
        if self.jitter_ratio > 0:
            jitter = max(0.0, float(self.jitter_ratio))
            return random.uniform(dur * (1.0 - jitter), dur * (1.0 + jitter))
        return dur


def _default_exception_classifier(exc: BaseException) -> bool:
    """Conservative retry classification for transport-level exceptions."""
    if isinstance(exc, (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)):
        return True
    if isinstance(exc, (TimeoutError, ConnectionError)):
        return True
    # Some libraries wrap network issues in OSError; allow ECONNRESET/ETIMEDOUT by message
    msg = str(exc).lower()
    return any(k in msg for k in ('timed out', 'connection reset', 'connection aborted', 'broken pipe'))
