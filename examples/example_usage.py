"""Ví dụ: dùng service layer (không qua Flask).

Controllers are a thin layer; the record and photo rules live in the services.
"""

import importlib

from config import get_settings_module

from employee_records.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    print(container.employee_service.add({"empId": "E1", "firstName": "Ann", "position": "Engineer"}).to_dict())
    print(container.employee_service.list_all().to_dict())

    photo = container.photo_service.upload_photo("data:image/png;base64,QQ==", "E1").to_dict()
    print(photo)
    if photo["success"]:
        print(container.employee_service.update({"empId": "E1", "firstName": "Ann", "photoId": photo["photoId"]}, "E1").to_dict())


if __name__ == "__main__":
    main()
