from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.serialization import to_jsonable
from ..common.web import json_body, login_required, permission_required
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Permission
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        session["teacher_id"] = s_user.teacher_id

        return jsonify({"success": True, "user": to_jsonable(s_user), "permissions": s_user.permissions})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/auth/me", endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "user_id": session["user_id"],
                "name": session.get("name"),
                "role": session.get("role"),
                "teacher_id": session.get("teacher_id"),
            }
        )

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @permission_required(Permission.MANAGE_USERS)
    def list_users():
        users = container.user_service.list_users()
        return jsonify(
            [
                {"user_id": u.user_id, "name": u.name, "username": u.username, "role": u.role.value, "teacher_id": u.teacher_id, "is_active": u.is_active}
                for u in users
            ]
        )

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @permission_required(Permission.MANAGE_USERS)
    def create_user():
        data = json_body()
        user_id = container.user_service.create_account(
            current_role=session.get("role"),
            name=data.get("name", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
            role=data.get("role", ""),
            teacher_id=data.get("teacher_id"),
        )
        return jsonify({"success": True, "user_id": user_id}), 201
