import os
import logging
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./strings.db"
CAT_FACTS_API = "https://catfact.ninja/fact"
API_TIMEOUT = 5.0


class Settings:
    """Service configuration read from the environment."""

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ

        self.database_url = normalize_database_url(env.get("DATABASE_URL") or DEFAULT_DATABASE_URL)

        # Profile
        self.user_email = env.get("USER_EMAIL", "your.email@example.com")
        self.user_name = env.get("USER_NAME", "Your Full Name")
        self.user_stack = env.get("USER_STACK", "Python/FastAPI")

        # External API
        self.cat_facts_api = env.get("CAT_FACTS_API", CAT_FACTS_API)
        self.api_timeout = float(env.get("API_TIMEOUT", API_TIMEOUT))

        self.log_level = env.get("LOG_LEVEL", "INFO").upper()
        self.port = int(env.get("PORT", 8000))


def normalize_database_url(url: str) -> str:
    """Railway-style mysql:// URLs need the pymysql driver spelled out for SQLAlchemy."""
    if url.startswith("mysql://"):
        return url.replace("mysql://", "mysql+pymysql://", 1)
    return url


@lru_cache
def get_settings() -> Settings:
    # Load .env only for local development
    if os.path.exists(".env"):
        load_dotenv()
        logger.info("Loading from .env file (local development)")
    else:
        logger.info("Loading from environment (production)")
    return Settings()
