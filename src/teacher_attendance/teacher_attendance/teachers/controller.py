from __future__ import annotations

from flask import Flask, jsonify

from ..common.serialization import to_jsonable
from ..common.web import json_body, permission_required, scoped_teacher_id
from ..core.enums import Permission
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    @permission_required(Permission.READ_TEACHERS, Permission.READ_TEACHERS_SELF)
    def list_teachers():
        only = scoped_teacher_id(None, full=Permission.READ_TEACHERS, own=Permission.READ_TEACHERS_SELF)
        if only is not None:
            return jsonify([to_jsonable(container.teacher_service.get_teacher(only))])
        return jsonify(to_jsonable(container.teacher_service.list_teachers()))

    @app.route("/api/teachers/<int:teacher_id>", methods=["GET"], endpoint="get_teacher")
    @permission_required(Permission.READ_TEACHERS, Permission.READ_TEACHERS_SELF)
    def get_teacher(teacher_id: int):
        tid = scoped_teacher_id(teacher_id, full=Permission.READ_TEACHERS, own=Permission.READ_TEACHERS_SELF)
        return jsonify(to_jsonable(container.teacher_service.get_teacher(tid)))

    @app.route("/api/teachers", methods=["POST"], endpoint="create_teacher")
    @permission_required(Permission.WRITE_TEACHERS)
    def create_teacher():
        data = json_body()
        teacher_id = container.teacher_service.create_teacher(
            name=data.get("name", ""),
            designation=data.get("designation", ""),
            base_salary=data.get("base_salary", 0),
            join_date=data.get("join_date"),
            contact=data.get("contact"),
        )
        return jsonify({"success": True, "teacher_id": teacher_id}), 201

    @app.route("/api/teachers/<int:teacher_id>", methods=["PUT"], endpoint="update_teacher")
    @permission_required(Permission.WRITE_TEACHERS)
    def update_teacher(teacher_id: int):
        teacher = container.teacher_service.update_teacher(teacher_id, **json_body())
        return jsonify({"success": True, "teacher": to_jsonable(teacher)})

    @app.route("/api/teachers/<int:teacher_id>", methods=["DELETE"], endpoint="delete_teacher")
    @permission_required(Permission.WRITE_TEACHERS)
    def delete_teacher(teacher_id: int):
        container.teacher_service.delete_teacher(teacher_id)
        return jsonify({"success": True})
