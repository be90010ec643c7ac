"""Settings shared by every environment module."""

import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "escalaflex-dev-secret"

    # Armazenamento local: json | mysql | memory
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "json")
    STORAGE_PATH = os.environ.get("STORAGE_PATH", os.path.join(os.path.expanduser("~"), ".escalaflex", "data.json"))

    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_NAME = os.environ.get("DB_NAME", "escalaflex")

    OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY") or None
    OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TIMEOUT = float(os.environ.get("OPENAI_TIMEOUT", "30"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
