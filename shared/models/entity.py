"""Entity registry for the staffing backend.

Every record type the bridge knows about is described by one EntitySpec: which
backend collection it lives in, which bucket it fills in a search response,
how its list and single-record responses are wrapped, and which fields are
searched.
"""

from enum import Enum

from pydantic import BaseModel


class EntityType(str, Enum):
    JOB = "job"
    LEAD = "lead"
    JOB_SEEKER = "jobSeeker"
    ORGANIZATION = "organization"
    TASK = "task"
    HIRING_MANAGER = "hiringManager"
    PLACEMENT = "placement"


class EntitySpec(BaseModel):
    """
    Describes how a single entity type is stored and searched on the backend.

    Attributes:
        entity_type (EntityType): The described entity type.
        bucket (str): Key of the result bucket in a search response (e.g. "jobSeekers").
        path (str): Backend collection path (e.g. "/api/job-seekers").
        record_key (str): Key the backend may nest a single record under (e.g. "jobSeeker").
        list_keys (tuple[str, ...]): Candidate keys for unwrapping a list response, tried in order.
        search_fields (tuple[str, ...]): Record fields checked by the text matcher.
        slug (str): Kebab-case singular name used in URLs (e.g. "job-seeker").
    """

    entity_type: EntityType
    bucket: str
    path: str
    record_key: str
    list_keys: tuple[str, ...]
    search_fields: tuple[str, ...]
    slug: str


class ParsedRecordId(BaseModel):
    """A display record ID such as "O54", split into its type and numeric id."""

    type: EntityType
    id: int


ENTITY_SPECS: dict[EntityType, EntitySpec] = {
    EntityType.JOB: EntitySpec(
        entity_type=EntityType.JOB,
        bucket="jobs",
        path="/api/jobs",
        record_key="job",
        list_keys=("jobs",),
        search_fields=("job_title", "title", "company_name", "organization_name", "location", "description", "id"),
        slug="job",
    ),
    EntityType.LEAD: EntitySpec(
        entity_type=EntityType.LEAD,
        bucket="leads",
        path="/api/leads",
        record_key="lead",
        list_keys=("leads",),
        search_fields=("name", "first_name", "last_name", "company_name", "email", "phone", "id"),
        slug="lead",
    ),
    EntityType.JOB_SEEKER: EntitySpec(
        entity_type=EntityType.JOB_SEEKER,
        bucket="jobSeekers",
        path="/api/job-seekers",
        record_key="jobSeeker",
        list_keys=("jobSeekers", "job_seekers"),
        search_fields=("first_name", "last_name", "name", "email", "phone", "title", "id"),
        slug="job-seeker",
    ),
    EntityType.ORGANIZATION: EntitySpec(
        entity_type=EntityType.ORGANIZATION,
        bucket="organizations",
        path="/api/organizations",
        record_key="organization",
        list_keys=("organizations",),
        search_fields=("name", "website", "phone", "address", "overview", "id"),
        slug="organization",
    ),
    EntityType.TASK: EntitySpec(
        entity_type=EntityType.TASK,
        bucket="tasks",
        path="/api/tasks",
        record_key="task",
        list_keys=("tasks",),
        search_fields=("title", "task_title", "description", "notes", "id"),
        slug="task",
    ),
    EntityType.HIRING_MANAGER: EntitySpec(
        entity_type=EntityType.HIRING_MANAGER,
        bucket="hiringManagers",
        path="/api/hiring-managers",
        record_key="hiringManager",
        list_keys=("hiringManagers", "hiring_managers"),
        search_fields=("name", "first_name", "last_name", "email", "phone", "organization_name", "id"),
        slug="hiring-manager",
    ),
    EntityType.PLACEMENT: EntitySpec(
        entity_type=EntityType.PLACEMENT,
        bucket="placements",
        path="/api/placements",
        record_key="placement",
        list_keys=("placements",),
        search_fields=("job_title", "jobSeekerName", "job_seeker_name", "status", "id"),
        slug="placement",
    ),
}

# unwrap priority for single-record responses
RECORD_UNWRAP_ORDER: tuple[EntityType, ...] = (
    EntityType.ORGANIZATION,
    EntityType.JOB,
    EntityType.LEAD,
    EntityType.JOB_SEEKER,
    EntityType.TASK,
    EntityType.HIRING_MANAGER,
    EntityType.PLACEMENT,
)

# unwrap priority used when resolving a record's display name
RESOLVE_UNWRAP_ORDER: tuple[EntityType, ...] = (
    EntityType.ORGANIZATION,
    EntityType.HIRING_MANAGER,
    EntityType.JOB,
    EntityType.JOB_SEEKER,
    EntityType.LEAD,
    EntityType.PLACEMENT,
    EntityType.TASK,
)


def get_entity_spec(entity_type: EntityType) -> EntitySpec:
    """
    Returns the registry entry of an entity type.

    Args:
        entity_type (EntityType): The entity type to look up.

    Returns:
        EntitySpec: The registered spec.
    """
    return ENTITY_SPECS[entity_type]


def find_entity_type(name: str) -> EntityType | None:
    """
    Resolves a loose type name to an EntityType.

    Accepts singular and plural kebab-case slugs ("hiring-manager", "hiring-managers"),
    the enum values ("hiringManager") and bucket names ("hiringManagers").
    Whitespace is treated as a dash and matching is case-insensitive.

    Args:
        name (str): The type name to resolve.

    Returns:
        EntityType | None: The matching type, or None if unknown.
    """
    normalized = "-".join(name.strip().lower().split())
    if not normalized:
        return None
    for spec in ENTITY_SPECS.values():
        candidates = {
            spec.slug,
            f"{spec.slug}s",
            spec.entity_type.value.lower(),
            spec.bucket.lower(),
        }
        if normalized in candidates:
            return spec.entity_type
    return None
