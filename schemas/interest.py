from typing import Optional

from pydantic import BaseModel


class InterestCreate(BaseModel):
    """At least one of name/email must be non-blank; checked by the service, not here."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
