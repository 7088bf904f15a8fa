from datetime import date

from src.teacher_attendance.teacher_attendance.core.enums import HolidayType
from src.teacher_attendance.teacher_attendance.holidays.model import Holiday
from src.teacher_attendance.teacher_attendance.holidays.registry import HolidayRegistry


def test_same_date_collapses_to_last_added():
    reg = HolidayRegistry(
        [
            Holiday(date=date(2025, 1, 26), name="Republic Day"),
            Holiday(date=date(2025, 1, 26), name="Republic Day (school)", type=HolidayType.SCHOOL),
        ]
    )

    assert len(reg) == 1
    assert reg.get(date(2025, 1, 26)).name == "Republic Day (school)"
    assert reg.get(date(2025, 1, 26)).type == HolidayType.SCHOOL


def test_membership_and_remove():
    reg = HolidayRegistry([Holiday(date=date(2025, 3, 14), name="Holi")])

    assert reg.is_holiday(date(2025, 3, 14))
    assert date(2025, 3, 14) in reg
    assert not reg.is_holiday(date(2025, 3, 15))

    assert reg.remove(date(2025, 3, 14)) is True
    assert reg.remove(date(2025, 3, 14)) is False
    assert len(reg) == 0


def test_for_month_is_sorted_and_bounded():
    reg = HolidayRegistry(
        [
            Holiday(date=date(2025, 2, 1), name="Feb"),
            Holiday(date=date(2025, 1, 26), name="Late Jan"),
            Holiday(date=date(2025, 1, 1), name="New Year"),
        ]
    )

    assert [h.name for h in reg.for_month(2025, 1)] == ["New Year", "Late Jan"]
    assert [h.name for h in reg] == ["New Year", "Late Jan", "Feb"]
