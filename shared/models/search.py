"""Pydantic models for the federated record search."""

from pydantic import BaseModel

from shared.helper.RecordIdHelper import parse_record_id
from shared.models.entity import EntityType, ParsedRecordId


class SearchQuery(BaseModel):
    """
    A trimmed search query decomposed into its matching parts.

    Attributes:
        text (str): The trimmed query text.
        terms (list[str]): Whitespace-separated terms, case preserved.
        parsed_id (ParsedRecordId | None): Set when the whole query is a record ID.
    """

    text: str
    terms: list[str]
    parsed_id: ParsedRecordId | None = None

    @classmethod
    def from_text(cls, raw: str) -> "SearchQuery":
        text = raw.strip()
        return cls(text=text, terms=text.split(), parsed_id=parse_record_id(text))


class ExactRecord(BaseModel):
    """Outcome of the direct by-id lookup. data is None when the lookup failed."""

    type: EntityType
    id: int
    data: dict | None = None
