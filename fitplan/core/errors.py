"""
Error taxonomy for the plan-generation pipeline.

Only ProfileValidationError ever reaches a caller. Upstream and response
errors are absorbed by the response validator and turned into the
bundled fallback plan.
"""


class FitPlanError(Exception):
    """Base class for all FitPlan errors."""


class ProfileValidationError(FitPlanError):
    """The submitted user profile is malformed."""

    def __init__(self, errors: list[dict]):
        self.errors = errors
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ())) or "profile"
            for err in errors
        )
        super().__init__(f"Invalid profile fields: {fields}")


class UpstreamError(FitPlanError):
    """A call to the upstream model endpoint failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class TransientUpstreamError(UpstreamError):
    """Network failure, 5xx or 429. Worth retrying."""


class TerminalUpstreamError(UpstreamError):
    """Non-retryable status such as 400/401/403."""


class ExhaustedError(UpstreamError):
    """Every attempt allowed by the retry policy failed."""

    def __init__(self, attempts: int, last_error: UpstreamError):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Upstream still failing after {attempts} attempts: {last_error}",
            status_code=last_error.status_code,
        )


class MalformedResponseError(FitPlanError):
    """The upstream body is empty, not JSON, or not shaped like a plan."""
