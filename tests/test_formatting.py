from datetime import date, datetime

from schoolboard.utils.formatting import format_date, format_long_date
from schoolboard.utils.school_levels import get_school_level_label


def test_short_date_has_no_padding():
    assert format_date(date(2026, 3, 5)) == "5/3/2026"
    assert format_date("2025-12-31") == "31/12/2025"


def test_long_date_in_indonesian():
    assert format_long_date(date(2026, 10, 17)) == "Sabtu, 17 Oktober 2026"
    assert format_long_date(datetime(2024, 1, 1, 8, 30)) == "Senin, 1 Januari 2024"


def test_unparseable_dates_pass_through():
    assert format_date(None) == ""
    assert format_long_date("bukan tanggal") == "bukan tanggal"


def test_school_level_labels():
    assert get_school_level_label("smp") == "SMP"
    assert get_school_level_label("paud") == "PAUD"
    assert get_school_level_label(None) == ""
