"""Serves the API with uvicorn: ``python -m relief_admin``."""
import uvicorn

from .core import config


def main() -> None:
    uvicorn.run(
        "relief_admin.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
