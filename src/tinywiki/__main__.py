"""Run the wiki with ``python -m tinywiki``."""

import uvicorn

from tinywiki.config import Settings
from tinywiki.main import create_app


def main() -> None:
    settings = Settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
