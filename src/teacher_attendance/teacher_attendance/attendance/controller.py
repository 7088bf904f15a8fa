from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_year_month
from ..common.serialization import to_jsonable
from ..common.web import arg_date, arg_int, json_body, permission_required, scoped_teacher_id
from ..core.enums import Permission
from ..core.exceptions import ValidationError
from ..container import Container


def _month_arg() -> tuple[int, int]:
    raw = request.args.get("month")
    if not raw:
        raise ValidationError("month is required (YYYY-MM)")
    return parse_year_month(raw)


def _teacher_id(data: dict) -> int:
    try:
        return int(data.get("teacher_id"))
    except (TypeError, ValueError) as exc:
        raise ValidationError("teacher_id must be an integer") from exc


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["PUT"], endpoint="mark_attendance")
    @permission_required(Permission.WRITE_ATTENDANCE)
    def mark_attendance():
        data = json_body()
        rec = container.attendance_service.mark(_teacher_id(data), data.get("date"), data.get("status"))
        return jsonify({"success": True, "record": to_jsonable(rec)})

    @app.route("/api/attendance/toggle", methods=["POST"], endpoint="toggle_attendance")
    @permission_required(Permission.WRITE_ATTENDANCE)
    def toggle_attendance():
        data = json_body()
        rec = container.attendance_service.toggle(_teacher_id(data), data.get("date"))
        return jsonify({"success": True, "record": to_jsonable(rec)})

    @app.route("/api/attendance/mark-all", methods=["POST"], endpoint="mark_all_attendance")
    @permission_required(Permission.WRITE_ATTENDANCE)
    def mark_all_attendance():
        data = json_body()
        count = container.attendance_service.mark_all_for_day(data.get("date"), data.get("status"))
        return jsonify({"success": True, "count": count})

    @app.route("/api/attendance", methods=["DELETE"], endpoint="clear_attendance")
    @permission_required(Permission.WRITE_ATTENDANCE)
    def clear_attendance():
        teacher_id = arg_int("teacher_id")
        if teacher_id is None:
            raise ValidationError("teacher_id is required")
        container.attendance_service.clear(teacher_id, arg_date("date"))
        return jsonify({"success": True})

    @app.route("/api/attendance/month", methods=["GET"], endpoint="attendance_month")
    @permission_required(Permission.READ_ATTENDANCE, Permission.READ_ATTENDANCE_SELF)
    def attendance_month():
        year, month = _month_arg()
        teacher_id = scoped_teacher_id(
            arg_int("teacher_id"), full=Permission.READ_ATTENDANCE, own=Permission.READ_ATTENDANCE_SELF
        )
        grid = container.attendance_service.effective_month(year, month, teacher_id=teacher_id)
        return jsonify(to_jsonable(grid))

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @permission_required(Permission.READ_ATTENDANCE)
    def attendance_stats():
        year, month = _month_arg()
        return jsonify(to_jsonable(container.attendance_service.month_stats(year, month)))
