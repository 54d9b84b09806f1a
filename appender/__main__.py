"""Run the appender server.

    python -m appender
"""

import uvicorn

from appender.config import Settings
from appender.main import configure_logging, create_app


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    # uvicorn exits the process if the listener cannot bind
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
