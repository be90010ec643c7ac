SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_PATH = ""
DB_CONFIG = {}

# No outbound AI calls while testing
OPENAI_API_KEY = None
OPENAI_MODEL = "gpt-4o-mini"
OPENAI_TIMEOUT = 5.0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
