import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY

STORAGE_BACKEND = Config.STORAGE_BACKEND
STORAGE_PATH = Config.STORAGE_PATH
DB_CONFIG = Config.db_config()

OPENAI_API_KEY = Config.OPENAI_API_KEY
OPENAI_MODEL = Config.OPENAI_MODEL
OPENAI_TIMEOUT = Config.OPENAI_TIMEOUT

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# If enabled with the mysql backend, the kv table is created on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
