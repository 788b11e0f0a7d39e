from typing import Optional
from pydantic_settings import BaseSettings

__all__ = [
    'Settings'
]

class Settings(BaseSettings):
    PROJECT_NAME: str = "Link Shortener"
    VERSION: str = "0.1.0"
    HOST: str = "127.0.0.1"
    PORT: int = 9876
    BASE_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def public_base_url(self) -> str:
        """Externally reachable address that short links are built on"""
        base_url = self.BASE_URL or f"http://{self.HOST}:{self.PORT}"
        return base_url.rstrip("/")
