"""In-process caches implementing the domain cache port."""

from .response_cache import SingleFlightResponseCache, request_signature

__all__ = ["SingleFlightResponseCache", "request_signature"]
