import os
import tempfile

from .base import Config

SECRET_KEY = "test-secret"

TABLE_BACKEND = "mysql"
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_records_test"),
}
SHEET_TABLE = Config.SHEET_TABLE

GOOGLE_CREDENTIALS_FILE = ""
GOOGLE_SPREADSHEET_ID = ""
GOOGLE_SHEET_NAME = Config.GOOGLE_SHEET_NAME

PHOTO_BACKEND = "local"
PHOTO_ROOT = os.getenv("PHOTO_ROOT", os.path.join(tempfile.gettempdir(), "employee-records-photos"))
PHOTO_FOLDER_NAME = Config.PHOTO_FOLDER_NAME

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
