import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "teacher_attendance"),
    }


# Working-day denominator for attendance rates: Sundays are always excluded;
# holidays only when this is on.
REPORT_EXCLUDE_HOLIDAYS = env_flag("REPORT_EXCLUDE_HOLIDAYS", "0")

# Raise on the first malformed attendance record instead of skipping it.
STRICT_ATTENDANCE_INPUT = env_flag("STRICT_ATTENDANCE_INPUT", "0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
