from __future__ import annotations

import uvicorn
from dotenv import load_dotenv

from furniro.config import settings
from furniro.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    load_dotenv()
    setup_logging()

    if settings.SERVERLESS:
        logger.info("Serverless environment detected; not binding a port.")
        return

    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(
        "furniro.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
