from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/upload-photo", methods=["POST"], endpoint="upload_photo")
    def upload_photo():
        body = json_body()
        photo = container.photo_service.upload(
            file_name=body.get("fileName"),
            file_data=body.get("fileData"),
            student_id=body.get("studentId") or None,
        )
        return ok(photo.to_dict(), message="Photo uploaded successfully")
