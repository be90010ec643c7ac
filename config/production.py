import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = Config.STORAGE_BACKEND
STORAGE_PATH = Config.STORAGE_PATH
DB_CONFIG = Config.db_config()

OPENAI_API_KEY = Config.OPENAI_API_KEY
OPENAI_MODEL = Config.OPENAI_MODEL
OPENAI_TIMEOUT = Config.OPENAI_TIMEOUT

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
