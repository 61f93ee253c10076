"""
Domain Layer Package

Core analytics logic: value objects, pure services for validation,
regression and projection, and the interfaces (gateways, ports) that
the infrastructure layer implements. No framework dependencies.
"""

# Re-export submodules
from nock_analytics.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "services", "ports"]
