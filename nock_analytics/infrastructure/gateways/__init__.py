"""
Gateways Package - Infrastructure Layer

Concrete implementations of the gateway interfaces defined in the
domain layer.
"""

from .nockblocks_gateway import NockBlocksGateway

__all__ = ["NockBlocksGateway"]
