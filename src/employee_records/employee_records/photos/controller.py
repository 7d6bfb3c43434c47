from __future__ import annotations

from flask import Flask, abort, request, send_file

from ..common.responses import json_result
from ..container import Container
from .local_store import LocalFileStore


def register(app: Flask, container: Container) -> None:
    @app.route("/api/photos", methods=["POST"], endpoint="upload_photo")
    def upload_photo():
        body = request.get_json(silent=True) or {}
        if not isinstance(body, dict):
            body = {}
        return json_result(container.photo_service.upload_photo(body.get("imageData"), body.get("empId")))

    @app.route("/photos/<path:photo_id>", methods=["GET"], endpoint="view_photo")
    def view_photo(photo_id: str):
        files = container.files
        if not isinstance(files, LocalFileStore):
            abort(404)
        try:
            path = files.resolve(photo_id)
        except ValueError:
            abort(404)
        if not path.is_file():
            abort(404)
        return send_file(path)
