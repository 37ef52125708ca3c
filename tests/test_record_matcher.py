import pytest

from shared.helper.RecordMatcher import RecordMatcher, coerce_record_id, stringify_value
from shared.models.entity import EntityType, get_entity_spec
from shared.models.search import SearchQuery


def matcher_for(text: str) -> RecordMatcher:
    return RecordMatcher(SearchQuery.from_text(text))


class TestMatchesAllTerms:
    def test_every_term_must_match_some_field(self):
        fields = get_entity_spec(EntityType.JOB).search_fields
        record = {"id": 54, "job_title": "Senior Engineer"}

        assert matcher_for("engineer 54").matches_all_terms(record, fields)
        assert not matcher_for("engineer 55").matches_all_terms(record, fields)

    def test_terms_may_match_different_fields(self):
        fields = get_entity_spec(EntityType.JOB_SEEKER).search_fields
        record = {"id": 1, "first_name": "Ada", "last_name": "Lovelace"}

        assert matcher_for("ada lovelace").matches_all_terms(record, fields)

    def test_case_insensitive(self):
        fields = get_entity_spec(EntityType.JOB).search_fields
        record = {"id": 2, "job_title": "Staff Engineer"}

        assert matcher_for("ENGINEER").matches_all_terms(record, fields)
        assert matcher_for("sTaFf").matches_all_terms(record, fields)

    def test_missing_and_null_fields_are_empty(self):
        fields = get_entity_spec(EntityType.ORGANIZATION).search_fields
        record = {"id": 3, "name": None}

        assert not matcher_for("acme").matches_all_terms(record, fields)

    def test_only_configured_fields_are_searched(self):
        fields = get_entity_spec(EntityType.TASK).search_fields
        record = {"id": 4, "title": "Call back", "owner": "Grace"}

        assert not matcher_for("grace").matches_all_terms(record, fields)

    def test_nested_object_keys_are_not_searchable(self):
        fields = get_entity_spec(EntityType.ORGANIZATION).search_fields
        record = {"id": 9, "name": "Acme", "address": {"city": "Berlin", "street": "Main"}}

        assert not matcher_for("city").matches_all_terms(record, fields)
        assert not matcher_for("berlin").matches_all_terms(record, fields)
        assert not matcher_for("city").matches(record, EntityType.ORGANIZATION)

    def test_list_field_values_are_searchable(self):
        fields = get_entity_spec(EntityType.ORGANIZATION).search_fields
        record = {"id": 9, "name": "Acme", "phone": ["030 1234", None, "040 5678"]}

        assert matcher_for("040").matches_all_terms(record, fields)
        assert not matcher_for("none").matches_all_terms(record, fields)
        assert not matcher_for("'").matches_all_terms(record, fields)

    def test_no_terms_never_matches(self):
        matcher = RecordMatcher(SearchQuery(text="", terms=[]))
        assert not matcher.matches_all_terms({"id": 1, "name": "x"}, ("name",))


class TestMatchesId:
    def test_record_id_query_matches_same_type_and_number(self):
        matcher = matcher_for("O54")
        assert matcher.matches_id(54, EntityType.ORGANIZATION)
        assert matcher.matches_id("54", EntityType.ORGANIZATION)

    def test_non_ascii_digits_are_not_a_record_id(self):
        matcher = matcher_for("O٥٤")
        assert not matcher.matches_id(54, EntityType.ORGANIZATION)

    def test_record_id_query_ignores_other_types(self):
        matcher = matcher_for("O54")
        assert not matcher.matches_id(54, EntityType.JOB)

    def test_terms_match_stringified_id(self):
        matcher = matcher_for("12")
        assert matcher.matches_id(123, EntityType.TASK)
        assert not matcher.matches_id(45, EntityType.TASK)

    def test_missing_id_never_matches(self):
        matcher = matcher_for("O0")
        assert not matcher.matches_id(None, EntityType.ORGANIZATION)

    def test_no_terms_and_no_record_id(self):
        matcher = RecordMatcher(SearchQuery(text="", terms=[]))
        assert not matcher.matches_id(1, EntityType.JOB)


class TestMatches:
    def test_record_id_query_matches_without_text_match(self):
        matcher = matcher_for("O54")
        record = {"id": 54, "name": "Acme Corp"}

        assert matcher.matches(record, EntityType.ORGANIZATION)

    def test_filter_records_keeps_backend_order(self):
        matcher = matcher_for("eng")
        records = [
            {"id": 3, "job_title": "Engineer"},
            {"id": 1, "job_title": "Designer"},
            {"id": 2, "job_title": "Engineering Lead"},
        ]

        assert [r["id"] for r in matcher.filter_records(records, EntityType.JOB)] == [3, 2]


class TestValueHelpers:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ""), (True, "true"), (False, "false"), (54.0, "54"), (54.5, "54.5"), (7, "7"), ("Acme", "Acme"),
            ({"city": "Berlin"}, "[object Object]"),
            (["a", None, 2.0, True], "a,,2,true"),
            (["a", ["b", "c"], {"k": 1}], "a,b,c,[object Object]"),
            ([], ""),
        ],
    )
    def test_stringify_value(self, value, expected):
        assert stringify_value(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(54, 54.0), ("54", 54.0), (" 54 ", 54.0), (54.0, 54.0), (None, None), (True, None), ("abc", None)],
    )
    def test_coerce_record_id(self, value, expected):
        assert coerce_record_id(value) == expected
