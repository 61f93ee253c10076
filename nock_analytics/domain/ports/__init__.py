"""Domain ports package."""

from .cache import CacheResult, IResponseCache, request_signature
from .health_check import IHealthCheckService

__all__ = ["CacheResult", "IResponseCache", "IHealthCheckService", "request_signature"]
