class BackendRequestError(Exception):
    """Raised when the staffing backend answers with a non-OK status."""

    def __init__(self, message: str, url: str, status_code: int, payload: dict | None = None):
        self.message = message
        self.url = url
        self.status_code = status_code
        self.payload = payload or {}
        super().__init__(self.message)


class BackendPayloadError(Exception):
    """Raised when a backend response body is not the JSON shape we expect."""

    def __init__(self, message: str, url: str):
        self.message = message
        self.url = url
        super().__init__(self.message)


class UnknownEntityTypeError(ValueError):
    """Raised when a caller names a record type the bridge does not know."""

    def __init__(self, message: str, type_name: str):
        self.message = message
        self.type_name = type_name
        super().__init__(self.message)
