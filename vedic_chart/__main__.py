import uvicorn

from .config import get_settings
from .logging_setup import configure_logging


def main():
    settings = get_settings()
    configure_logging(settings.backend_log)
    uvicorn.run(
        "vedic_chart.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.backend_log,
    )


if __name__ == "__main__":
    main()
