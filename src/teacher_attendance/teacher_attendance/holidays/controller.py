from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_year_month
from ..common.serialization import to_jsonable
from ..common.web import json_body, permission_required
from ..core.enums import Permission
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @permission_required(Permission.READ_ATTENDANCE, Permission.READ_ATTENDANCE_SELF)
    def list_holidays():
        month = request.args.get("month")
        if month:
            holidays = container.holiday_service.list_for_month(*parse_year_month(month))
        else:
            start = request.args.get("start")
            end = request.args.get("end")
            holidays = container.holiday_service.list_holidays(
                start=parse_iso_date(start) if start else None,
                end=parse_iso_date(end) if end else None,
            )
        return jsonify(to_jsonable(holidays))

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @permission_required(Permission.WRITE_ATTENDANCE)
    def add_holiday():
        data = json_body()
        holiday = container.holiday_service.add_holiday(
            holiday_date=data.get("date"),
            name=data.get("name", ""),
            holiday_type=data.get("type", "festival"),
        )
        return jsonify({"success": True, "holiday": to_jsonable(holiday)}), 201

    @app.route("/api/holidays/<holiday_date>", methods=["DELETE"], endpoint="remove_holiday")
    @permission_required(Permission.WRITE_ATTENDANCE)
    def remove_holiday(holiday_date: str):
        container.holiday_service.remove_holiday(holiday_date)
        return jsonify({"success": True})
