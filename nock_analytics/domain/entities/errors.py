"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NockBlocksRPCError(DomainError):
    """Raised when a NockBlocks JSON-RPC call fails or returns an unusable payload."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        super().__init__(message, details)


class DatasetUnavailableError(DomainError):
    """Raised when no valid points remain for a dataset after validation."""

    def __init__(self, dataset: str, details: Optional[Dict[str, Any]] = None):
        self.dataset = dataset
        message = f"No valid {dataset} data points after filtering"
        super().__init__(message, details)
