from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/classes", methods=["GET"], endpoint="classes_list")
    def classes_list():
        return ok([c.to_dict() for c in container.class_service.list_classes()])

    @app.route("/classes", methods=["POST"], endpoint="classes_replace")
    def classes_replace():
        classes = container.class_service.replace_classes(json_body().get("classes"))
        return ok([c.to_dict() for c in classes], message="Classes updated successfully")
