import os

from .base import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

TABLE_BACKEND = Config.TABLE_BACKEND
DB_CONFIG = Config.db_config()
SHEET_TABLE = Config.SHEET_TABLE

GOOGLE_CREDENTIALS_FILE = Config.GOOGLE_CREDENTIALS_FILE
GOOGLE_SPREADSHEET_ID = Config.GOOGLE_SPREADSHEET_ID
GOOGLE_SHEET_NAME = Config.GOOGLE_SHEET_NAME

PHOTO_BACKEND = Config.PHOTO_BACKEND
PHOTO_ROOT = Config.PHOTO_ROOT
PHOTO_FOLDER_NAME = Config.PHOTO_FOLDER_NAME

DEBUG = True

# If enabled, app will create the sheet table on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
