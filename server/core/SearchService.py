"""Search service: federated record search across all backend collections.

One search fans out one request per record type plus an optional direct
lookup by record ID, waits for all of them, filters each collection with the
query terms and merges everything into one SearchResults value. A failing
collection only empties its own bucket.
"""

import asyncio

from shared.clients.ats.ATSClientInterface import ATSClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.helper.RecordMatcher import RecordMatcher, coerce_record_id
from shared.models.entity import ENTITY_SPECS, EntitySpec, EntityType, get_entity_spec
from shared.models.search import ExactRecord, SearchQuery
from server.models.responses import SearchResponse, SearchResults


class SearchService:
    """Orchestrates the per-collection fetches, filtering and result assembly."""

    def __init__(
        self,
        helper_config: HelperConfig,
        ats_client: ATSClientInterface,
    ) -> None:
        self.logging = helper_config.get_logger()
        self._ats = ats_client

    ##########################################
    ################ CORE ####################
    ##########################################

    async def do_search(self, query_text: str, token: str) -> SearchResponse:
        """Search every record collection for the given query.

        Args:
            query_text (str): The raw, non-empty query text.
            token (str): Session token forwarded to the backend.

        Returns:
            SearchResponse: The trimmed query and one result bucket per record type.
        """
        query = SearchQuery.from_text(query_text)
        matcher = RecordMatcher(query)
        self.logging.info(
            "Executing search: query=%r terms=%d parsed_id=%s",
            query.text[:80],
            len(query.terms),
            query.parsed_id.model_dump() if query.parsed_id else None,
        )

        specs = list(ENTITY_SPECS.values())
        outcomes = await asyncio.gather(
            *[self._fetch_bucket(spec.entity_type, query, token) for spec in specs],
            self._fetch_exact_record(query, token),
            return_exceptions=True,
        )
        bucket_outcomes, exact_outcome = outcomes[:-1], outcomes[-1]

        pairs = [
            self._filter_bucket(spec, outcome, matcher)
            for spec, outcome in zip(specs, bucket_outcomes)
        ]
        exact = exact_outcome if isinstance(exact_outcome, ExactRecord) else None
        results = self._assemble_results(pairs, exact)

        self.logging.info("Search complete: query=%r results=%d", query.text[:80], results.total())
        return SearchResponse(success=True, query=query.text, results=results)

    ##########################################
    ################ FETCH ###################
    ##########################################

    async def _fetch_bucket(self, entity_type: EntityType, query: SearchQuery, token: str) -> list[dict]:
        """Fetch the candidate records of one type. Never raises; a failure yields [].

        Args:
            entity_type (EntityType): The record type to fetch.
            query (SearchQuery): The parsed query (leads use the backend search).
            token (str): Session token forwarded to the backend.

        Returns:
            list[dict]: Raw records in backend order, unfiltered.
        """
        if entity_type == EntityType.LEAD:
            try:
                return await self._ats.do_search_leads(query.text, token)
            except Exception as exc:
                self.logging.warning("Lead search endpoint failed, falling back to full lead list: %s", exc)

        try:
            return await self._ats.do_fetch_records(entity_type, token)
        except Exception as exc:
            self.logging.warning("Fetching %s failed, returning no results: %s", get_entity_spec(entity_type).bucket, exc)
            return []

    async def _fetch_exact_record(self, query: SearchQuery, token: str) -> ExactRecord | None:
        """Fetch the record addressed by a record-ID query. Never raises.

        Args:
            query (SearchQuery): The parsed query.
            token (str): Session token forwarded to the backend.

        Returns:
            ExactRecord | None: None if the query is not a record ID; data is None if the lookup failed.
        """
        parsed_id = query.parsed_id
        if parsed_id is None:
            return None

        try:
            record = await self._ats.do_fetch_record(parsed_id.type, parsed_id.id, token)
        except Exception as exc:
            self.logging.warning(
                "Direct lookup of %s #%d failed: %s", parsed_id.type.value, parsed_id.id, exc
            )
            record = None
        return ExactRecord(type=parsed_id.type, id=parsed_id.id, data=record)

    ##########################################
    ############### HELPERS ##################
    ##########################################

    def _filter_bucket(self, spec: EntitySpec, outcome: object, matcher: RecordMatcher) -> tuple[str, list[dict]]:
        """Filter one fetched collection down to the matching records.

        Args:
            spec (EntitySpec): The collection's entity spec.
            outcome (object): The gathered fetch result, or the exception it raised.
            matcher (RecordMatcher): The matcher for the current query.

        Returns:
            tuple[str, list[dict]]: The bucket name and its matching records.
        """
        if isinstance(outcome, BaseException):
            self.logging.error("Fetch task for %s raised unexpectedly: %r", spec.bucket, outcome)
            return spec.bucket, []
        try:
            return spec.bucket, matcher.filter_records(outcome, spec.entity_type)
        except Exception as exc:
            self.logging.error("Processing %s results failed: %s", spec.bucket, exc)
            return spec.bucket, []

    def _assemble_results(self, pairs: list[tuple[str, list[dict]]], exact: ExactRecord | None) -> SearchResults:
        """Merge the filtered buckets and the direct lookup into one result.

        Args:
            pairs (list[tuple[str, list[dict]]]): (bucket, records) per collection.
            exact (ExactRecord | None): The direct lookup outcome.

        Returns:
            SearchResults: All buckets, the exact record first in its bucket if it was not already there.
        """
        buckets = dict(pairs)
        if exact is not None and exact.data is not None:
            bucket = get_entity_spec(exact.type).bucket
            buckets[bucket] = _prepend_if_missing(buckets.get(bucket, []), exact)
        return SearchResults(**buckets)


def _prepend_if_missing(records: list[dict], exact: ExactRecord) -> list[dict]:
    """Return records with the exact record in front, unless its id is already present."""
    exact_id = coerce_record_id(exact.data.get("id"))
    if exact_id is None:
        exact_id = float(exact.id)
    for record in records:
        if isinstance(record, dict) and coerce_record_id(record.get("id")) == exact_id:
            return records
    return [exact.data, *records]
