from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_jsonable
from ..common.web import arg_bool, arg_date, arg_int, csv_response, permission_required
from ..core.enums import Permission
from ..container import Container
from .periods import period_range
from .service import CSV_FIELDS


def register(app: Flask, container: Container) -> None:
    def _range():
        period = request.args.get("period")
        if period:
            return period_range(period)
        return arg_date("start"), arg_date("end")

    def _report():
        start, end = _range()
        return container.report_service.build_report(
            start=start,
            end=end,
            teacher_id=arg_int("teacher_id"),
            exclude_holidays=arg_bool("exclude_holidays"),
        )

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_report")
    @permission_required(Permission.READ_REPORTS)
    def attendance_report():
        return jsonify(to_jsonable(_report()))

    @app.route("/api/reports/attendance/export", methods=["GET"], endpoint="attendance_report_export")
    @permission_required(Permission.READ_REPORTS)
    def attendance_report_export():
        report = _report()
        return csv_response(
            app,
            rows=container.report_service.to_csv_rows(report),
            fieldnames=CSV_FIELDS,
            filename=f"attendance-report-{report.start.isoformat()}-{report.end.isoformat()}.csv",
        )

    @app.route("/api/reports/trend", methods=["GET"], endpoint="attendance_trend")
    @permission_required(Permission.READ_REPORTS)
    def attendance_trend():
        start, end = _range()
        points = container.report_service.monthly_trend(start=start, end=end, exclude_holidays=arg_bool("exclude_holidays"))
        return jsonify(to_jsonable(points))
