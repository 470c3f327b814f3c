SCHOOL_LEVELS = {
    'tk': 'TK',
    'sd': 'SD',
    'smp': 'SMP',
    'sma': 'SMA',
}


def get_school_level_label(level):
    """Display label of a level; unknown values are shown upper-cased."""
    if not level:
        return ''
    return SCHOOL_LEVELS.get(level, level.upper())
