import logging
import sys

import uvicorn
from config import ApplicationConfig, ConfigurationError
from src.api.app import create_app

logging.basicConfig(
    level=ApplicationConfig.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("api")

try:
    app = create_app(ApplicationConfig)
except ConfigurationError as exc:
    logger.critical(f"Invalid configuration: {exc}")
    sys.exit(1)

if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=not ApplicationConfig.is_production(),
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
