"""
NockChain Analytics

Power-law analytics over the NockChain network, served over HTTP.

Layer Structure:
- Domain: Entities, analysis services and the gateway/cache interfaces
- Application: Use cases and DTOs
- Infrastructure: NockBlocks JSON-RPC gateway, response cache, health check
- Presentation: FastAPI controllers
- Shared: Constants and logging
- Main: Composition root, application entry point and configuration
"""
