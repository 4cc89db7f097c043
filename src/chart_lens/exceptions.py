"""Custom exceptions for chart-lens."""


class ChartLensError(Exception):
    """Base exception for chart-lens."""

    pass


class InvalidURLError(ChartLensError):
    """Raised when a data source URL is empty or not http(s)."""

    pass


class FetchError(ChartLensError):
    """Raised when a data source cannot be reached."""

    pass


class HTTPStatusError(FetchError):
    """Raised when a data source answers with a non-2xx status."""

    def __init__(self, status: int, url: str):
        super().__init__(f"HTTP {status} from {url}")
        self.status = status
        self.url = url


class InvalidJSONError(ChartLensError):
    """Raised when a data source body is not valid JSON."""

    pass


class RecordExtractionError(ChartLensError):
    """Raised when a record's fields cannot be read during extraction."""

    def __init__(self, index: int, reason: str):
        super().__init__(f"record {index}: {reason}")
        self.index = index
        self.reason = reason
