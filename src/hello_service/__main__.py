"""
Run the service with ``python -m hello_service``.
"""
import uvicorn

from .app import create_app
from .config import get_settings
from .logging_config import LoggingConfig


def main():
    settings = get_settings()
    LoggingConfig(settings.log_level, settings.log_file).setup_logging()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
