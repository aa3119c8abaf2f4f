from typing import Any, Optional


def clean_text(value: Any) -> Optional[str]:
    """Trim a client-supplied value; blank or missing becomes None."""
    if value is None:
        return None
    return str(value).strip() or None
