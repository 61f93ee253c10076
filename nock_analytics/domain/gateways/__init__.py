"""
Gateways Package - Domain Layer

Interfaces for external service communication. Implementations live in
the infrastructure layer.
"""

from .nockblocks_gateway import INockBlocksGateway

__all__ = ["INockBlocksGateway"]
