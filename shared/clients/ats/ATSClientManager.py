from shared.helper.HelperConfig import HelperConfig
from shared.clients.ats.ATSClientInterface import ATSClientInterface


class ATSClientManager:
    """
    Manager class to instantiate the ATS backend client named in the configuration.
    """

    def __init__(self, helper_config: HelperConfig):
        self.helper_config = helper_config
        self.logging = helper_config.get_logger()
        self.client = self._initialize_client()

    def _get_engine_from_env(self) -> str:
        """
        Reads the ATS engine from ENV configuration, defaulting to the REST backend.

        Returns:
            str: The capitalized engine name, e.g. "Rest".
        """
        engine = self.helper_config.get_string_val("ATS_ENGINE", default="Rest")
        return engine.strip().lower().capitalize()

    def _initialize_client(self) -> ATSClientInterface:
        """
        Instantiates the ATS client for the configured engine.

        Returns:
            ATSClientInterface: The client instance.

        Raises:
            ValueError: If the configured engine is not supported.
        """
        engine = self._get_engine_from_env()
        className = f"ATSClient{engine}"
        try:
            module = __import__(
                f"shared.clients.ats.{engine.lower()}.{className}",
                fromlist=[className],
            )
            client_class = getattr(module, className)
        except (ImportError, AttributeError) as e:
            raise ValueError(f"Unsupported ATS engine specified: '{engine}'. Error: {e}")
        self.logging.debug(f"Instantiated ATS client for engine: {engine}")
        return client_class(helper_config=self.helper_config)

    def get_client(self) -> ATSClientInterface:
        """
        Returns the instantiated ATS client.

        Returns:
            ATSClientInterface: The ATS client instance.
        """
        return self.client
