from pydantic import BaseModel, ConfigDict


class SearchResults(BaseModel):
    """Matching raw backend records, one bucket per record type. Every bucket is always present."""

    model_config = ConfigDict(frozen=True)

    jobs: list[dict] = []
    leads: list[dict] = []
    jobSeekers: list[dict] = []
    organizations: list[dict] = []
    tasks: list[dict] = []
    hiringManagers: list[dict] = []
    placements: list[dict] = []

    def total(self) -> int:
        return sum(len(getattr(self, bucket)) for bucket in type(self).model_fields)


class SearchResponse(BaseModel):
    success: bool = True
    query: str
    results: SearchResults


class ResolvedRecordResponse(BaseModel):
    success: bool = True
    name: str
    id: str
    type: str
    recordId: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
