from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..common.validators import as_text, optional_text
from ..core.exceptions import DomainError
from ..container import Container
from ..sessions.middleware import current_identity, token_required


def register(app: Flask, container: Container) -> None:
    auth_required = token_required(container.auth_service)

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        data = json_body()
        try:
            result = container.auth_service.register(
                employee_name=as_text(data.get("employeeName")),
                employee_id=as_text(data.get("employeeID")),
                email=as_text(data.get("email")),
                password="" if data.get("password") is None else str(data.get("password")),
                department=optional_text(data.get("department")),
                position=optional_text(data.get("position")),
            )
        except DomainError as e:
            return error_response(e)

        return jsonify(
            {
                "message": "User registered successfully!",
                "user": result.user.to_public_dict(),
                "token": result.token,
            }
        ), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        password = data.get("password")
        try:
            result = container.auth_service.login(
                as_text(data.get("employeeID")),
                "" if password is None else str(password),
            )
        except DomainError as e:
            return error_response(e)

        return jsonify(
            {
                "message": "Login successful!",
                "user": result.user.to_public_dict(),
                "token": result.token,
            }
        )

    @app.route("/api/user/profile", methods=["GET"], endpoint="user_profile")
    @auth_required
    def user_profile():
        try:
            user = container.user_service.get_profile(current_identity().user_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "success", "user": user.to_public_dict()})
