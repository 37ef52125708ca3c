from shared.clients.ats.ATSClientInterface import ATSClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig
from shared.models.entity import EntityType, get_entity_spec


class ATSClientRest(ATSClientInterface):
    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)
        self._base_url = helper_config.get_api_base_url()
        self._healthcheck_endpoint = self.get_config_val("HEALTHCHECK_ENDPOINT", default="/api/jobs", val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Rest"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="HEALTHCHECK_ENDPOINT", val_type="string", default="/api/jobs"),
        ]

    ################ AUTH ##################
    def _get_auth_header(self, token: str | None) -> dict:
        if token:
            return {"Authorization": f"Bearer {token}"}
        else:
            return {}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_healthcheck(self) -> str:
        return self._healthcheck_endpoint

    def _get_endpoint_records(self, entity_type: EntityType) -> str:
        return get_entity_spec(entity_type).path

    def _get_endpoint_record_details(self, entity_type: EntityType, record_id: int | str) -> str:
        return f"{get_entity_spec(entity_type).path}/{record_id}"

    def _get_endpoint_lead_search(self) -> str:
        return f"{get_entity_spec(EntityType.LEAD).path}/search/query"
