import os


def get_settings_module() -> str:
    # Cho phép chỉ định module cấu hình trực tiếp (vd: "config.production")
    explicit = os.getenv("EMPLOYEE_RECORDS_SETTINGS")
    if explicit:
        return explicit

    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
