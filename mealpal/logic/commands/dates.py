"""Natural date expressions used when planning a recipe ("for next friday")."""
import re
from datetime import date, timedelta
from typing import Optional

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

_EXPRESSION_RE = re.compile(
    r"^(?:(?P<simple>today|tomorrow)"
    r"|(?P<which>this|next)\s+(?P<unit>week|weekend|" + "|".join(WEEKDAYS) + r"))$"
)


def _days_until(today: date, weekday: int) -> int:
    """Days from today to the next given weekday (0 if today is that weekday)."""
    return (weekday - today.weekday()) % 7


def resolve_date_expression(text: str, today: Optional[date] = None) -> Optional[date]:
    """Resolve a relative day expression against ``today``.

    Supported: today, tomorrow, this/next week, this/next weekend,
    this/next <weekday>. Returns None for anything else.
    """
    today = today or date.today()
    m = _EXPRESSION_RE.match(text.strip().lower().rstrip('.!?'))
    if not m:
        return None
    if m.group('simple') == 'today':
        return today
    if m.group('simple') == 'tomorrow':
        return today + timedelta(days=1)

    which, unit = m.group('which'), m.group('unit')
    if unit == 'week':
        return today if which == 'this' else today + timedelta(days=7)
    if unit == 'weekend':
        saturday = today + timedelta(days=_days_until(today, 5))
        return saturday if which == 'this' else saturday + timedelta(days=7)

    ahead = _days_until(today, WEEKDAYS.index(unit))
    if which == 'next' and ahead == 0:
        ahead = 7
    return today + timedelta(days=ahead)


__all__ = ['resolve_date_expression', 'WEEKDAYS']
