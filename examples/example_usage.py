"""Example: compute a month's salary sheet through the service layer (no Flask).

Controllers are a thin layer; the attendance/salary rules live in services.
"""

import importlib

from config import get_settings_module

from src.teacher_attendance.teacher_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    sheet = container.payroll_service.build_salary_sheet(year=2025, month=1)
    for row in sheet.rows:
        print(row.teacher_name, row.result.computed_salary, row.result.deductions, row.result.net_salary)
    print("total net:", sheet.summary.total_net_salary)


if __name__ == "__main__":
    main()
