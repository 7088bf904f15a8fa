from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_year_month
from ..common.serialization import to_jsonable
from ..common.web import arg_int, csv_response, permission_required, scoped_teacher_id
from ..core.enums import Permission
from ..core.exceptions import ValidationError
from ..container import Container
from .service import CSV_FIELDS


def register(app: Flask, container: Container) -> None:
    def _sheet():
        raw = request.args.get("month")
        if not raw:
            raise ValidationError("month is required (YYYY-MM)")
        year, month = parse_year_month(raw)
        teacher_id = scoped_teacher_id(arg_int("teacher_id"), full=Permission.READ_SALARY, own=Permission.READ_SALARY_SELF)
        return container.payroll_service.build_salary_sheet(year=year, month=month, teacher_id=teacher_id)

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_sheet")
    @permission_required(Permission.READ_SALARY, Permission.READ_SALARY_SELF)
    def payroll_sheet():
        return jsonify(to_jsonable(_sheet()))

    @app.route("/api/payroll/export", methods=["GET"], endpoint="payroll_export")
    @permission_required(Permission.READ_SALARY)
    def payroll_export():
        sheet = _sheet()
        return csv_response(
            app,
            rows=container.payroll_service.to_csv_rows(sheet),
            fieldnames=CSV_FIELDS,
            filename=f"salary-report-{sheet.year:04d}-{sheet.month:02d}.csv",
        )
