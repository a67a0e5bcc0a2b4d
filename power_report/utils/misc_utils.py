# power_report/utils/misc_utils.py
from datetime import date, datetime, timezone
from typing import Optional


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(timezone.utc).date()


def describe_error(exc: BaseException) -> str:
    """Renders an exception and its causes as 'outer: inner: root'."""
    parts = []
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current) or type(current).__name__
        parts.append(text)
        current = current.__cause__
    return ": ".join(parts)
