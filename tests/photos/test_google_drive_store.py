from __future__ import annotations

from employee_records.photos.google_drive_store import FOLDER_MIME_TYPE, GoogleDriveFileStore


class FakeRequest:
    def __init__(self, response):
        self._response = response

    def execute(self):
        return self._response


class FakeDriveService:
    def __init__(self, listed=()):
        self.listed = list(listed)
        self.calls = []

    def files(self):
        return self

    def list(self, **kwargs):
        self.calls.append(("list", kwargs))
        return FakeRequest({"files": self.listed})

    def create(self, **kwargs):
        self.calls.append(("create", kwargs))
        return FakeRequest({"id": f"id-{len(self.calls)}", "name": kwargs["body"]["name"]})


def test_find_folders_matches_exact_name_in_order():
    service = FakeDriveService(
        listed=[
            {"id": "f1", "name": "Employee Photos"},
            {"id": "f2", "name": "employee photos"},
            {"id": "f3", "name": "Employee Photos"},
        ]
    )

    assert GoogleDriveFileStore(service).find_folders("Employee Photos") == ["f1", "f3"]
    query = service.calls[0][1]["q"]
    assert "name = 'Employee Photos'" in query
    assert f"mimeType = '{FOLDER_MIME_TYPE}'" in query


def test_folder_name_quotes_are_escaped():
    service = FakeDriveService()

    GoogleDriveFileStore(service).find_folders("Bob's Photos")

    assert "name = 'Bob\\'s Photos'" in service.calls[0][1]["q"]


def test_create_folder_and_file():
    service = FakeDriveService()
    store = GoogleDriveFileStore(service)

    folder_id = store.create_folder("Employee Photos")
    file_id = store.create_file(folder_id, "E1_1.png", "image/png", b"A")

    folder_call = service.calls[0][1]
    file_call = service.calls[1][1]
    assert folder_call["body"] == {"name": "Employee Photos", "mimeType": FOLDER_MIME_TYPE}
    assert file_call["body"] == {"name": "E1_1.png", "parents": [folder_id]}
    assert file_call["media_body"].mimetype() == "image/png"
    assert store.view_url(file_id) == f"https://drive.google.com/uc?export=view&id={file_id}"
