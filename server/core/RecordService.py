"""Record service: resolves a typed record id to a human-readable display name."""

from shared.clients.ats.ATSClientInterface import ATSClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.helper.RecordIdHelper import format_record_id
from shared.models.entity import ENTITY_SPECS, RESOLVE_UNWRAP_ORDER, EntityType, find_entity_type
from shared.models.errors import BackendPayloadError, UnknownEntityTypeError
from server.models.responses import ResolvedRecordResponse


class RecordService:
    """Looks up single records and derives their display names."""

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

    async def do_resolve(self, type_name: str, record_id: int, token: str) -> ResolvedRecordResponse:
        """Resolve a record to its display name.

        Args:
            type_name (str): Loose type name, e.g. "hiring-manager" or "Job Seekers".
            record_id (int): The record's id.
            token (str): Session token forwarded to the backend.

        Returns:
            ResolvedRecordResponse: The display name, the normalised type and the display record ID.

        Raises:
            UnknownEntityTypeError: If type_name does not name a known record type.
            BackendRequestError: If the backend rejects the lookup.
        """
        normalized_type = "-".join(type_name.strip().lower().split())
        entity_type = find_entity_type(normalized_type)
        if entity_type is None:
            supported = ", ".join(spec.slug for spec in ENTITY_SPECS.values())
            raise UnknownEntityTypeError(
                f'Unknown type: "{type_name}". Supported: {supported}', type_name=type_name
            )

        try:
            record = await self._ats.do_fetch_record(
                entity_type, record_id, token, unwrap_order=RESOLVE_UNWRAP_ORDER
            ) or {}
        except BackendPayloadError as exc:
            # an OK answer without a JSON body still resolves, to the fallback name
            self.logging.warning("Record %s #%d has no JSON body: %s", entity_type.value, record_id, exc)
            record = {}
        name = _get_display_name(entity_type, record, record_id).strip()
        self.logging.debug("Resolved %s #%d to %r", entity_type.value, record_id, name)

        return ResolvedRecordResponse(
            success=True,
            name=name or f"#{record_id}",
            id=str(record_id),
            type=normalized_type,
            recordId=format_record_id(entity_type, record_id),
        )


##########################################
############### HELPERS ##################
##########################################

def _first_text(record: dict, *keys: str) -> str:
    for key in keys:
        value = record.get(key)
        if value:
            return str(value)
    return ""


def _full_name(record: dict) -> str:
    return _first_text(record, "full_name") or " ".join(
        str(part) for part in (record.get("first_name"), record.get("last_name")) if part
    )


def _get_display_name(entity_type: EntityType, record: dict, record_id: int) -> str:
    if entity_type == EntityType.ORGANIZATION:
        return _first_text(record, "name")
    if entity_type in (EntityType.HIRING_MANAGER, EntityType.JOB_SEEKER):
        return _full_name(record)
    if entity_type == EntityType.JOB:
        return _first_text(record, "job_title", "title")
    if entity_type == EntityType.LEAD:
        return _full_name(record) or _first_text(record, "name", "organization_name", "company_name")
    if entity_type == EntityType.PLACEMENT:
        job_seeker_name = _first_text(record, "jobSeekerName", "job_seeker_name") or " ".join(
            str(part) for part in (record.get("first_name"), record.get("last_name")) if part
        )
        job_title = _first_text(record, "jobTitle", "job_title", "job_name")
        return " - ".join(part for part in (job_seeker_name, job_title) if part) or f"Placement #{record_id}"
    if entity_type == EntityType.TASK:
        return _first_text(record, "title", "subject")
    return ""
