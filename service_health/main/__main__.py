"""
Main module entry point.

This allows serving the API as: python -m service_health.main
"""

import uvicorn

from service_health.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "service_health.main.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
