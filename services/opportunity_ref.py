"""
Externally visible opportunity identifiers.

Opportunities live in two tables (admin-curated and SME-submitted), so the id
shown to clients carries its source: "admin-12", "sme-7". Bare numeric ids
predate the prefix and always meant SME opportunities.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from errors import InvalidReference

OpportunitySource = Literal["admin", "sme"]

SOURCE_ADMIN: OpportunitySource = "admin"
SOURCE_SME: OpportunitySource = "sme"

_REF_RE = re.compile(r"^(admin|sme)-(\d+)$", re.ASCII)
_LEGACY_RE = re.compile(r"^\d+$", re.ASCII)


@dataclass(frozen=True)
class OpportunityRef:
    source: OpportunitySource
    id: int

    def __str__(self) -> str:
        return encode(self.source, self.id)


def encode(source: str, opportunity_id: int) -> str:
    return f"{source}-{opportunity_id}"


def decode(raw: str | None) -> OpportunityRef:
    """
    Parse "admin-<n>", "sme-<n>" or a bare legacy "<n>" (an SME opportunity).
    Raises InvalidReference for anything else, including zero ids.
    """
    value = raw or ""
    m = _REF_RE.match(value)
    if m:
        source, number = m.group(1), int(m.group(2))
    elif _LEGACY_RE.match(value):
        source, number = SOURCE_SME, int(value)
    else:
        raise InvalidReference()
    if number <= 0:
        raise InvalidReference()
    return OpportunityRef(source=source, id=number)
