"""Teacher Attendance package.

Organized by feature modules (calendar, holidays, attendance, payroll,
reports, ...) with a thin Flask controller layer over service/repository
layers. The attendance-to-salary derivation is pure and performs no I/O.
"""
