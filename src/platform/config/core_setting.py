from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Campus Parking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Server
    HOST: str = '0.0.0.0'
    PORT: int = 3001

    # Database (any SQLAlchemy async URL)
    DATABASE_URL: str = 'sqlite+aiosqlite:///./parking.db'

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # Seconds a SQLite writer waits for the database write lock
    SQLITE_BUSY_TIMEOUT: float = 5.0

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith('sqlite')

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Business
    RESERVATION_FEE: float = 20.0


settings = Settings()  # type: ignore
