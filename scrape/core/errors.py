class ScrapeError(Exception):
    """Base class: the pipeline aborts and the CLI exits non-zero."""

class UrlParseError(ScrapeError):
    """The input could not be turned into an absolute URL."""

    def __init__(self, raw: str, reason: str = ""):
        self.raw = raw
        message = f"Invalid URL '{raw}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)

class RequestError(ScrapeError):
    """The GET request failed at the transport level."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Failed to GET from '{url}'")

class StreamError(ScrapeError):
    """Reading a body chunk failed mid-transfer."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Error while downloading '{url}'")

class EncodingError(ScrapeError):
    """The body is not valid text in its declared encoding."""

    def __init__(self, url: str, encoding: str):
        self.url = url
        self.encoding = encoding
        super().__init__(f"Response from '{url}' is not valid {encoding} text")

class InvalidQueryError(ScrapeError):
    """The selector (or the regex refining it) does not compile."""

    def __init__(self, query: str, kind: str = "selector"):
        self.query = query
        self.kind = kind
        super().__init__(f"Invalid {kind} '{query}'")

class RenderError(ScrapeError):
    """The highlighting backend could not render the content."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to render output: {reason}")
