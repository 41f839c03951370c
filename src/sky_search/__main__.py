"""Script entrypoint for the Sky Search API."""

import uvicorn

from sky_search.config import get_settings


def main() -> None:
    """Run server."""
    settings = get_settings()
    uvicorn.run(
        "sky_search.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        factory=False,
    )


if __name__ == "__main__":
    main()
