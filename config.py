import os


class Settings:
    APP_ENV = os.getenv("APP_ENV", "development").lower()

    # Database (SQLite locally, PostgreSQL in production)
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./school.db")
    SQL_ECHO = bool(int(os.getenv("SQL_ECHO", "0")))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma separated list of frontends allowed to call the API
    CORS_ORIGINS = [
        o.strip()
        for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if o.strip()
    ]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


settings = Settings()
