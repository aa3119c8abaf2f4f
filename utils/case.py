"""
Key normalization for admin request bodies, which arrive in either
snake_case (legacy admin panel) or camelCase (public frontend).
"""
from typing import Iterable

from pydantic.alias_generators import to_camel


def field_aliases(fields: Iterable[str]) -> dict[str, str]:
    """
    Map every accepted spelling of a field to its snake_case name:
    sub_industry and subIndustry -> sub_industry. SubIndustry is not mapped.
    """
    aliases: dict[str, str] = {}
    for name in fields:
        aliases[name] = name
        aliases[to_camel(name)] = name
    return aliases
