# taskboard/config/settings.py
# Runtime configuration read from the environment (.env supported)

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings"""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./taskboard.db")
    DB_SSLMODE: str = os.getenv("DB_SSLMODE", "")

    # JWT
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    RELOAD: bool = os.getenv("RELOAD", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
        if origin.strip()
    ]

    # Roles
    ADMIN_ROLE: str = "admin"
    EMPLOYEE_ROLE: str = "employee"

    @classmethod
    def is_sqlite(cls) -> bool:
        return cls.DATABASE_URL.startswith("sqlite")

    @classmethod
    def get_connect_args(cls) -> dict:
        """Driver specific connection arguments for create_engine"""
        if cls.is_sqlite():
            return {"check_same_thread": False}
        if cls.DB_SSLMODE:
            # e.g. "require" for hosted PostgreSQL
            return {"sslmode": cls.DB_SSLMODE}
        return {}


settings = Settings()
