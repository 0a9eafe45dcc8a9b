"""Exception hierarchy for holodex-client."""

from __future__ import annotations


class HolodexError(Exception):
    """Base class for all holodex-client errors."""


class ConfigurationError(HolodexError):
    """Raised when the client is constructed without usable settings."""


class FilterError(HolodexError):
    """Raised when a filter set is rejected before any request is sent."""

    def __init__(self, message: str, *, endpoint: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.fields = fields


class MissingRequiredField(FilterError):
    """A filter required by the endpoint is absent or empty."""

    def __init__(self, endpoint: str, field: str) -> None:
        super().__init__(
            f"{endpoint}: required filter '{field}' is missing",
            endpoint=endpoint,
            fields=(field,),
        )
        self.field = field


class IncompatibleFilterCombination(FilterError):
    """Filters are individually valid but not allowed together."""

    def __init__(self, endpoint: str, fields: tuple[str, ...], reason: str) -> None:
        super().__init__(
            f"{endpoint}: cannot combine {', '.join(fields)}: {reason}",
            endpoint=endpoint,
            fields=fields,
        )
        self.reason = reason


class UnsupportedFilter(FilterError):
    """A filter was supplied that the endpoint does not accept."""

    def __init__(self, endpoint: str, fields: tuple[str, ...]) -> None:
        super().__init__(
            f"{endpoint}: unsupported filter(s): {', '.join(fields)}",
            endpoint=endpoint,
            fields=fields,
        )


class MalformedResponse(HolodexError):
    """Raised when a response body cannot be decoded into the expected shape."""

    def __init__(self, message: str, *, model: str | None = None) -> None:
        super().__init__(message)
        self.model = model


class TransportFailure(HolodexError):
    """Raised when the HTTP exchange fails or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        target: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.target = target
        self.status_code = status_code
