from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Bizdesk Dashboard Gateway"

    # Upstream REST backend (Laravel)
    UPSTREAM_API_URL: str = "http://localhost:8000/api"
    REQUEST_TIMEOUT: float = 50.0

    # Module caches
    CACHE_TTL_SECONDS: float = 120.0
    DEFAULT_PAGE_SIZE: int = 10
    ACTIVITY_LOG_PAGE_SIZE: int = 15

    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True

settings = Settings()
