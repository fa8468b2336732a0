"""Error taxonomy for notation resolution.

Failures inside a single fallback strategy or a single annotation layer are
caught and recorded where they happen. Only the errors below ever reach the
caller, and the engine converts them to a structured failure object.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Request-level failure kinds."""

    MALFORMED = "malformed"
    NOT_FOUND = "not_found"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    ALL_STRATEGIES_EXHAUSTED = "all_strategies_exhausted"


class VariantExplorerError(Exception):
    """Base exception for variantexplorer."""

    pass


class ResolutionError(VariantExplorerError):
    """A variant could not be resolved to coordinates.

    Attributes:
        kind: Failure kind reported to the caller
        detail: Human-readable explanation
        reasons: Per-strategy failure reasons, in the order they were tried
    """

    kind: ErrorKind = ErrorKind.NOT_FOUND

    def __init__(self, detail: str, reasons: list[str] | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.reasons = list(reasons or [])


class MalformedVariantError(ResolutionError):
    """Input did not match any supported notation."""

    kind = ErrorKind.MALFORMED


class NotFoundError(ResolutionError):
    """A lookup legitimately returned no data."""

    kind = ErrorKind.NOT_FOUND


class UpstreamUnavailableError(ResolutionError):
    """A remote service could not be reached or kept failing."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE


class UpstreamPayloadError(UpstreamUnavailableError):
    """A remote service answered with an error marker in its payload."""

    pass


class StrategiesExhaustedError(ResolutionError):
    """Every fallback strategy was tried and none produced coordinates."""

    kind = ErrorKind.ALL_STRATEGIES_EXHAUSTED
