import pytest

from shared.helper.RecordIdHelper import format_record_id, parse_record_id
from shared.models.entity import EntityType


class TestParseRecordId:
    @pytest.mark.parametrize(
        "text, expected_type, expected_id",
        [
            ("O54", EntityType.ORGANIZATION, 54),
            ("O 54", EntityType.ORGANIZATION, 54),
            ("  o54  ", EntityType.ORGANIZATION, 54),
            ("J7", EntityType.JOB, 7),
            ("JS12", EntityType.JOB_SEEKER, 12),
            ("js 12", EntityType.JOB_SEEKER, 12),
            ("HM3", EntityType.HIRING_MANAGER, 3),
            ("L9", EntityType.LEAD, 9),
            ("T100", EntityType.TASK, 100),
            ("P0", EntityType.PLACEMENT, 0),
        ],
    )
    def test_recognises_prefixed_ids(self, text, expected_type, expected_id):
        parsed = parse_record_id(text)
        assert parsed is not None
        assert parsed.type == expected_type
        assert parsed.id == expected_id

    @pytest.mark.parametrize(
        "text",
        ["", "54", "engineer", "O", "X54", "O54 engineer", "O-54", "JSX1", "O٥٤", "HM７"],
    )
    def test_returns_none_for_other_text(self, text):
        assert parse_record_id(text) is None


class TestFormatRecordId:
    def test_formats_each_type(self):
        assert format_record_id(EntityType.ORGANIZATION, 54) == "O54"
        assert format_record_id(EntityType.JOB_SEEKER, 12) == "JS12"
        assert format_record_id(EntityType.HIRING_MANAGER, "7") == "HM7"

    def test_format_then_parse_gives_same_reference(self):
        for entity_type in EntityType:
            parsed = parse_record_id(format_record_id(entity_type, 42))
            assert parsed.type == entity_type
            assert parsed.id == 42
