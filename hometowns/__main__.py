"""Run the web server: python -m hometowns"""

import uvicorn

from hometowns.api.app import create_app
from hometowns.config import Settings
from hometowns.logging_config import setup_logging


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
