"""Exception hierarchy for IngredientIQ.

Lower layers raise these; only the CLI decides what is fatal and which
exit code to use.
"""


class IngredientIQError(Exception):
    """Base class for all IngredientIQ errors."""


class ConfigError(IngredientIQError):
    """Credentials are missing or could not be persisted."""


class FileError(IngredientIQError):
    """A required local file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class FoodLogError(FileError):
    """The food log could not be read."""


class PromptFileError(FileError):
    """The system-prompt file could not be read."""


class ApiError(IngredientIQError):
    """Base class for chat API failures."""


class RequestFailedError(ApiError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Request failed with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class EmptyResponseError(ApiError):
    """The API answered without any completion choices."""

    def __init__(self) -> None:
        super().__init__("No response from API")


class ApiConnectionError(ApiError):
    """The request never produced an HTTP response (network error or timeout)."""

    def __init__(self, message: str):
        super().__init__(f"Connection error: {message}")


class MalformedResponseError(ApiError):
    """The API answered with a success status but an unusable body."""

    def __init__(self, message: str):
        super().__init__(f"Malformed response: {message}")
