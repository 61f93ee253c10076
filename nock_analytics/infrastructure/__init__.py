"""
Infrastructure Layer Package

Implementations of the domain interfaces: the NockBlocks HTTP gateway,
the response cache and the health check service.
"""

from nock_analytics.infrastructure import cache, gateways, services

__all__ = ["cache", "gateways", "services"]
