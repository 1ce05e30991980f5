import logging
import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("APP_CONFIG_FILE", os.path.join(ROOT_PATH, "env.yaml"))

DEV_JWT_SECRET = "dev-secret-key-change-in-production"

logger = logging.getLogger(__name__)

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ConfigurationError(Exception):
    """Raised at startup when the service cannot run with the given config"""


class ApplicationConfig:
    DB_URI = data.get("DB_URI")
    JWT_SECRET = data.get("JWT_SECRET")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    RESET_TOKEN_DEV_MODE = bool(data.get("RESET_TOKEN_DEV_MODE", False))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:5173"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", 1))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SESSION_TTL_SECONDS = int(data.get("SESSION_TTL_SECONDS", 60 * 60 * 8))
    RESET_TOKEN_TTL_SECONDS = int(data.get("RESET_TOKEN_TTL_SECONDS", 60 * 30))

    @classmethod
    def is_production(cls) -> bool:
        return str(cls.ENVIRONMENT).lower() == "production"

    @classmethod
    def signing_secret(cls) -> str:
        """Session signing secret; the dev fallback is refused in production"""
        if cls.JWT_SECRET:
            return cls.JWT_SECRET
        if cls.is_production():
            raise ConfigurationError("JWT_SECRET is required in production")
        logger.warning("JWT_SECRET not set, using the development signing secret")
        return DEV_JWT_SECRET

    @classmethod
    def reset_token_echo(cls) -> bool:
        """Whether forgot-password responses carry the raw token (dev only)"""
        return cls.RESET_TOKEN_DEV_MODE and not cls.is_production()

    @classmethod
    def validate(cls) -> None:
        if not cls.DB_URI:
            raise ConfigurationError("Missing DB_URI in configuration")
        cls.signing_secret()
        if cls.RESET_TOKEN_DEV_MODE and cls.is_production():
            logger.warning("RESET_TOKEN_DEV_MODE is ignored in production")
