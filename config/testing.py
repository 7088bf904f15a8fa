from config.config import REPORT_EXCLUDE_HOLIDAYS, db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="12345")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
STRICT_ATTENDANCE_INPUT = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
