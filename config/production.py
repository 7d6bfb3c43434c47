import os

from .base import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TABLE_BACKEND = os.getenv("TABLE_BACKEND", "google_sheets")
DB_CONFIG = Config.db_config()
SHEET_TABLE = Config.SHEET_TABLE

GOOGLE_CREDENTIALS_FILE = Config.GOOGLE_CREDENTIALS_FILE
GOOGLE_SPREADSHEET_ID = Config.GOOGLE_SPREADSHEET_ID
GOOGLE_SHEET_NAME = Config.GOOGLE_SHEET_NAME

PHOTO_BACKEND = os.getenv("PHOTO_BACKEND", "google_drive")
PHOTO_ROOT = Config.PHOTO_ROOT
PHOTO_FOLDER_NAME = Config.PHOTO_FOLDER_NAME

DEBUG = False

AUTO_INIT_DB = Config.AUTO_INIT_DB
