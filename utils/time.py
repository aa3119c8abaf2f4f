from datetime import datetime, timezone
from typing import Optional


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """ISO string with an explicit offset; naive values (SQLite reads) are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
