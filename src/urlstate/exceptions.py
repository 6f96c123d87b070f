"""Custom exception classes for urlstate."""


class URLStateError(Exception):
    """Base exception for urlstate errors."""

    def __init__(self, message: str, code: str = "internal", detail: str = ""):
        self.message = message
        self.code = code
        self.detail = detail
        super().__init__(message)


class InvalidURLError(URLStateError):
    """An absolute URL was required but could not be parsed."""

    def __init__(self, url: str, detail: str = ""):
        self.url = url
        super().__init__(f"Invalid URL: {url}", code="invalid_url", detail=detail)


class CrossOriginError(URLStateError):
    """Two addresses that must share an origin do not."""

    def __init__(self, from_origin: str, to_origin: str):
        self.from_origin = from_origin
        self.to_origin = to_origin
        super().__init__(
            f"URLs do not share an origin: {from_origin} != {to_origin}",
            code="cross_origin",
        )
