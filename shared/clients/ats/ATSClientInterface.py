from abc import abstractmethod
from typing import Any

from shared.clients.ClientInterface import ClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.entity import RECORD_UNWRAP_ORDER, EntityType, get_entity_spec


class ATSClientInterface(ClientInterface):
    """Read access to the applicant tracking backend, on behalf of a session token.

    Every request method raises on failure (non-OK status, transport error,
    undecodable body). Callers decide whether a failure is fatal.
    """

    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "ats"

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_records(self, entity_type: EntityType) -> str:
        """
        Returns the endpoint path for listing all records of a type.

        Args:
            entity_type (EntityType): The record type.

        Returns:
            str: The endpoint path (e.g. "/api/job-seekers")
        """
        pass

    @abstractmethod
    def _get_endpoint_record_details(self, entity_type: EntityType, record_id: int | str) -> str:
        """
        Returns the endpoint path for a single record.

        Args:
            entity_type (EntityType): The record type.
            record_id (int | str): The record's id.

        Returns:
            str: The endpoint path (e.g. "/api/organizations/54")
        """
        pass

    @abstractmethod
    def _get_endpoint_lead_search(self) -> str:
        """
        Returns the endpoint path of the backend's own lead search. The query text
        is sent as the "query" URL parameter.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_fetch_records(self, entity_type: EntityType, token: str) -> list[dict]:
        """Fetch the full collection of one record type.

        Args:
            entity_type (EntityType): The record type to list.
            token (str): Session token forwarded as bearer auth.

        Returns:
            list[dict]: The raw records, in backend order.
        """
        body = await self.do_get_json(self._get_endpoint_records(entity_type), token=token)
        return self._parse_record_list(body, entity_type)

    async def do_search_leads(self, query: str, token: str) -> list[dict]:
        """Run the backend's lead search.

        Args:
            query (str): The raw query text.
            token (str): Session token forwarded as bearer auth.

        Returns:
            list[dict]: The raw lead records returned by the backend.
        """
        body = await self.do_get_json(self._get_endpoint_lead_search(), token=token, params={"query": query})
        return self._parse_record_list(body, EntityType.LEAD)

    async def do_fetch_record(
        self,
        entity_type: EntityType,
        record_id: int | str,
        token: str,
        unwrap_order: tuple[EntityType, ...] = RECORD_UNWRAP_ORDER,
    ) -> dict | None:
        """Fetch a single record by id.

        Args:
            entity_type (EntityType): The record type.
            record_id (int | str): The record's id.
            token (str): Session token forwarded as bearer auth.
            unwrap_order (tuple[EntityType, ...]): Priority of the wrapper keys tried on the body.

        Returns:
            dict | None: The unwrapped record, or None if the body holds no record object.
        """
        body = await self.do_get_json(self._get_endpoint_record_details(entity_type, record_id), token=token)
        return self._parse_record(body, unwrap_order)

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    def _parse_record_list(self, body: Any, entity_type: EntityType) -> list[dict]:
        """
        Unwrap a list response. The candidate keys of the entity type are tried in
        order; a bare JSON array is taken as is; anything else yields no records.

        Args:
            body (Any): The decoded JSON body.
            entity_type (EntityType): The record type, selects the candidate keys.

        Returns:
            list[dict]: The records.
        """
        if isinstance(body, dict):
            for key in get_entity_spec(entity_type).list_keys:
                records = body.get(key)
                if isinstance(records, list):
                    return records
            return []
        if isinstance(body, list):
            return body
        return []

    def _parse_record(self, body: Any, unwrap_order: tuple[EntityType, ...] = RECORD_UNWRAP_ORDER) -> dict | None:
        """
        Unwrap a single-record response. The record may be nested under its type's
        key, tried in a fixed priority, or be the body itself.

        Args:
            body (Any): The decoded JSON body.
            unwrap_order (tuple[EntityType, ...]): Wrapper keys to try, by entity type.

        Returns:
            dict | None: The record, or None if the body is not an object.
        """
        if not isinstance(body, dict):
            return None
        for entity_type in unwrap_order:
            record = body.get(get_entity_spec(entity_type).record_key)
            if record is not None:
                return record if isinstance(record, dict) else None
        return body
