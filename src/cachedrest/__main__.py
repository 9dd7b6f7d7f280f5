"""Run the API with uvicorn: ``python -m cachedrest``."""

import uvicorn

from cachedrest.config import settings


def main() -> None:
    uvicorn.run(
        "cachedrest.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
