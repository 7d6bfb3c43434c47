import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    # Bảng nhân viên: "mysql" hoặc "google_sheets"
    TABLE_BACKEND = os.environ.get("TABLE_BACKEND", "mysql")

    # Cấu hình DB
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "employee_records")
    SHEET_TABLE = os.environ.get("SHEET_TABLE", "employee_sheet")

    # Google Sheets / Drive (service account)
    GOOGLE_CREDENTIALS_FILE = os.environ.get("GOOGLE_CREDENTIALS_FILE", "credentials/service_account.json")
    GOOGLE_SPREADSHEET_ID = os.environ.get("GOOGLE_SPREADSHEET_ID", "")
    GOOGLE_SHEET_NAME = os.environ.get("GOOGLE_SHEET_NAME", "Employees")

    # Ảnh nhân viên: "local" hoặc "google_drive"
    PHOTO_BACKEND = os.environ.get("PHOTO_BACKEND", "local")
    PHOTO_ROOT = os.environ.get("PHOTO_ROOT", "instance/photos")
    PHOTO_FOLDER_NAME = os.environ.get("PHOTO_FOLDER_NAME", "Employee Photos")

    AUTO_INIT_DB = env_flag("AUTO_INIT_DB")

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
