"""HTTP transport infrastructure package."""

from .policy import RetryPolicy
from .transport import HttpxTransport, HttpxResponse

__all__ = ['RetryPolicy', 'HttpxTransport', 'HttpxResponse']
