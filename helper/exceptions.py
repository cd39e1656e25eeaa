class GatewayError(Exception):
    """Base error for calls to the AI gateway."""
    status_code = 500


class GatewayConfigError(GatewayError):
    """A credential or setting the gateway needs is missing."""
    status_code = 500


class GatewayRequestError(GatewayError):
    """The gateway answered with a non-2xx status or could not be reached."""
    status_code = 502

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code


class GatewayResponseError(GatewayError):
    """The gateway answered but not in the expected JSON / tool-call shape."""
    status_code = 502


class DraftStoreError(Exception):
    """A select/insert/update against the draft store failed."""


class WordPressError(Exception):
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code
