class ProbeError(Exception):
    """
    Base class for failures that abort a probe run with CRITICAL.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestError(ProbeError):
    def __init__(self, detail):
        super().__init__(f"API request error: {detail}")


class ResponseReadError(ProbeError):
    def __init__(self, detail):
        super().__init__(f"API response read error: {detail}")


class ResponseParseError(ProbeError):
    def __init__(self, detail):
        super().__init__(f"API response parse error {detail}")


class EmptyResultError(ProbeError):
    def __init__(self):
        super().__init__("API response error - no data")


class ValueParseError(ProbeError):
    """Raised when a sample value cannot be read as the expected number."""


class ZeroLivenessError(ProbeError):
    def __init__(self, instance: str):
        super().__init__(f"unable to scrape instance {instance}")
        self.instance = instance
