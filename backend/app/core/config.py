import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    EMPLOYEES_SOURCE_URL: str = "https://dummyjson.com/users"
    EMPLOYEES_FETCH_LIMIT: int = 20
    EMPLOYEES_FETCH_TIMEOUT_SECONDS: float = 15.0
    SIMULATED_WRITE_DELAY_SECONDS: float = 1.5

    BOOKMARKS_FILE: str = "hr-bookmarks.json"
    BOOKMARKS_STORAGE_KEY: str = "hr-bookmarks"

    DEFAULT_PAGE_SIZE: int = 6

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
