from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/init-admin", methods=["POST"], endpoint="init_admin")
    def init_admin():
        result = container.admin_service.init_default_admin()
        if not result.created:
            return ok(message="Admin user already exists", alreadyExists=True)
        return ok(message="Admin user created successfully", user=result.user.to_public_dict())

    @app.route("/signup", methods=["POST"], endpoint="signup")
    def signup():
        body = json_body()
        user = container.admin_service.signup(
            email=body.get("email"),
            password=body.get("password"),
            name=body.get("name"),
        )
        return ok(message="User created successfully", user=user.to_public_dict())
