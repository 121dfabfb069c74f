"""Serve the application with uvicorn."""

import uvicorn

from .core.config import get_settings


def main() -> None:
    settings = get_settings()
    # Logging is configured by the application lifespan.
    uvicorn.run(
        "periodic_notifier.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
