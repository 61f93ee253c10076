"""
Main module entry point.

This allows running the API as: python -m nock_analytics.main
"""

import uvicorn

from nock_analytics.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "nock_analytics.main.app:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
