class TimecardError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnauthorizedError(TimecardError):
    """Caller is not on the extraction allow-list."""


class MissingImageError(TimecardError):
    """Extraction request carried no image bytes."""


class ConfigurationError(TimecardError):
    """Server is missing configuration required for the request."""


class VisionCallError(TimecardError):
    """The image-understanding call failed or returned nothing."""


class ExtractionFailedError(TimecardError):
    """Model text could not be turned into a structured object.

    Terminal for the extraction attempt: carries the raw text so the user can
    read it and fall back to manual entry.
    """

    def __init__(self, reason: str, detail: str | None, raw_text: str) -> None:
        self.reason = reason
        self.detail = detail
        self.raw_text = raw_text
        super().__init__("Model did not return valid JSON")
