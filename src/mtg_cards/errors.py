"""Errors raised while talking to the MTG API and handling its responses.

Every error carries only the plain data needed to show it to a user
(a status code, a field name or a message) so that nothing from the
underlying HTTP or JSON libraries leaks out of the package.
"""


class MTGError(Exception):
    """Base class for every error raised by this package."""

    _fields: tuple = ()

    def __repr__(self) -> str:
        args = ", ".join(f"{f}={getattr(self, f)!r}" for f in self._fields)
        return f"{type(self).__name__}({args})"


class APIError(MTGError):
    """An error that came from the HTTP layer."""


class RequestFailed(APIError):
    """The GET request returned a non-success status code."""

    _fields = ("status",)

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"Get Request failed with status code: {status}")


class TransportError(APIError):
    """The request never produced a response (DNS, TLS, timeout...)."""

    _fields = ("message",)

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Wrapped transport error: {message}")


class CardError(MTGError):
    """An error raised while turning a response into cards."""


class NoCardFound(CardError):
    """The API answered with the empty card list."""

    def __init__(self) -> None:
        super().__init__("No Card Found")


class NoSuchCardName(NoCardFound):
    """An exact name search matched no cards."""

    _fields = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name
        CardError.__init__(self, f"No Cards exist with name: {name}")


class DeserializationError(CardError):
    """The response body was not the JSON we expected."""

    _fields = ("message",)

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Deserialization error: {message}")


class HeaderError(MTGError):
    """An error raised while reading pagination headers."""


class HeaderItemMissing(HeaderError):
    """A required header is absent from the response."""

    _fields = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Header Item Not Found: {name}")


class HeaderConversionError(HeaderError):
    """A header value could not be decoded or parsed."""

    _fields = ("message",)

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Conversion Error: {message}")
