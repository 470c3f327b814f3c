from datetime import date, datetime
from schoolboard.utils.school_levels import get_school_level_label

DAY_NAMES = ['Senin', 'Selasa', 'Rabu', 'Kamis', 'Jumat', 'Sabtu', 'Minggu']
MONTH_NAMES = [
    'Januari', 'Februari', 'Maret', 'April', 'Mei', 'Juni',
    'Juli', 'Agustus', 'September', 'Oktober', 'November', 'Desember'
]


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def format_date(value):
    """Short Indonesian date, e.g. 17/10/2026"""
    d = _as_date(value)
    if d is None:
        return value or ''
    return f'{d.day}/{d.month}/{d.year}'


def format_long_date(value):
    """Long Indonesian date, e.g. Sabtu, 17 Oktober 2026"""
    d = _as_date(value)
    if d is None:
        return value or ''
    return f'{DAY_NAMES[d.weekday()]}, {d.day} {MONTH_NAMES[d.month - 1]} {d.year}'


def register_filters(app):
    app.add_template_filter(get_school_level_label, 'school_level_label')
    app.add_template_filter(format_date, 'tanggal')
    app.add_template_filter(format_long_date, 'tanggal_panjang')
