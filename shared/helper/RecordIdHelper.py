"""Conversion between display record IDs ("O54", "JS 12") and typed ids."""

import re

from shared.models.entity import EntityType, ParsedRecordId

RECORD_ID_PREFIXES: dict[str, EntityType] = {
    "J": EntityType.JOB,
    "L": EntityType.LEAD,
    "JS": EntityType.JOB_SEEKER,
    "O": EntityType.ORGANIZATION,
    "T": EntityType.TASK,
    "HM": EntityType.HIRING_MANAGER,
    "P": EntityType.PLACEMENT,
}

# longest prefixes first, so "JS12" is never read as job "S12"
_PREFIX_ALTERNATION = "|".join(sorted(RECORD_ID_PREFIXES, key=len, reverse=True))
_RECORD_ID_PATTERN = re.compile(rf"^({_PREFIX_ALTERNATION})\s*([0-9]+)$", re.IGNORECASE)


def parse_record_id(text: str) -> ParsedRecordId | None:
    """
    Parses a display record ID.

    Args:
        text (str): Candidate ID such as "O54" or "hm 7".

    Returns:
        ParsedRecordId | None: The typed id, or None if the text is not a record ID.
    """
    if not text:
        return None
    match = _RECORD_ID_PATTERN.match(text.strip())
    if not match:
        return None
    prefix, number = match.groups()
    return ParsedRecordId(type=RECORD_ID_PREFIXES[prefix.upper()], id=int(number))


def format_record_id(entity_type: EntityType, record_id: int | str) -> str:
    """
    Formats a typed id as a display record ID, e.g. (organization, 54) -> "O54".

    Args:
        entity_type (EntityType): The record's type.
        record_id (int | str): The record's numeric id.

    Returns:
        str: The display ID.
    """
    for prefix, prefix_type in RECORD_ID_PREFIXES.items():
        if prefix_type == entity_type:
            return f"{prefix}{record_id}"
    raise ValueError(f"No record ID prefix registered for entity type '{entity_type.value}'.")
