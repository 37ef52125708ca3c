"""Decides whether a raw backend record belongs in a search result bucket."""

from typing import Any

from shared.models.entity import EntityType, get_entity_spec
from shared.models.search import SearchQuery


def stringify_value(value: Any) -> str:
    """
    Renders a raw JSON value as text for substring matching.

    None becomes "", booleans become "true"/"false" and integral floats drop
    their fractional part, so values read the same as in the JSON payload.
    Arrays are joined with "," and nested objects render as "[object Object]",
    so their key names never become searchable text.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, dict):
        return "[object Object]"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(item) for item in value)
    return str(value)


def coerce_record_id(value: Any) -> float | None:
    """
    Coerces a record id to a number, or None if it is not numeric.

    Args:
        value (Any): Raw id value, e.g. 54, "54" or 54.0.

    Returns:
        float | None: The numeric id.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


class RecordMatcher:
    """Matches records against the terms and optional record ID of one query."""

    def __init__(self, query: SearchQuery) -> None:
        self._parsed_id = query.parsed_id
        self._terms = [term.lower() for term in query.terms]

    def matches_id(self, record_id: Any, entity_type: EntityType) -> bool:
        """
        Checks a record id against the query.

        True when the query is a record ID of the same type and number, or when
        every term is contained in the stringified id. Records without an id never
        match.

        Args:
            record_id (Any): The record's raw id.
            entity_type (EntityType): The bucket the record belongs to.

        Returns:
            bool: Whether the id matches.
        """
        if record_id is None:
            return False

        if self._parsed_id is not None and self._parsed_id.type == entity_type:
            if coerce_record_id(record_id) == float(self._parsed_id.id):
                return True

        if not self._terms:
            return False
        id_text = stringify_value(record_id).lower()
        return all(term in id_text for term in self._terms)

    def matches_all_terms(self, record: dict, fields: tuple[str, ...] | list[str]) -> bool:
        """
        Checks that every term occurs in at least one of the given fields.

        Args:
            record (dict): The raw record.
            fields (tuple[str, ...] | list[str]): Field names to search.

        Returns:
            bool: False when the query has no terms.
        """
        if not self._terms:
            return False
        values = [stringify_value(record.get(field)).lower() for field in fields]
        return all(any(term in value for value in values) for term in self._terms)

    def matches(self, record: dict, entity_type: EntityType) -> bool:
        """Returns True if the record belongs in the bucket of its entity type."""
        fields = get_entity_spec(entity_type).search_fields
        return self.matches_id(record.get("id"), entity_type) or self.matches_all_terms(record, fields)

    def filter_records(self, records: list[dict], entity_type: EntityType) -> list[dict]:
        """Keeps the matching records in their original order."""
        return [record for record in records if self.matches(record, entity_type)]
