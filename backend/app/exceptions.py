"""Error taxonomy for the dashboard flow.

Identity, profile and access errors end the dashboard session and send the
caller back to the login page. Store errors abort aggregation but leave the
session intact. Malformed analysis payloads never leave ``patient_view``.
"""


class DashboardError(Exception):
    """Base class for dashboard errors."""


class IdentityUnavailable(DashboardError):
    """No authenticated caller, or the identity lookup failed."""

    def __init__(self, reason: str = "Missing authentication token"):
        self.reason = reason
        super().__init__(reason)


class ProfileNotFound(DashboardError):
    """The authenticated caller has no profile row."""

    def __init__(self, caller_id: str):
        self.caller_id = caller_id
        super().__init__(f"Profile {caller_id} not found")


class AccessDenied(DashboardError):
    """The caller is authenticated but is not a clinician."""

    def __init__(self, caller_id: str):
        self.caller_id = caller_id
        super().__init__(f"Access denied for {caller_id}: not a dentist")


class StoreUnavailable(DashboardError):
    """A record store query failed or timed out.

    Attributes:
        step: Which fetch failed (``caller_profile``, ``assignments`` or ``patients``).
    """

    def __init__(self, step: str, reason: str = ""):
        self.step = step
        self.reason = reason
        message = f"Record store unavailable during {step}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedRecord(DashboardError):
    """A row read from the store does not match its relation's schema."""

    def __init__(self, table: str, reason: str):
        self.table = table
        self.reason = reason
        super().__init__(f"Malformed {table} record: {reason}")


class MalformedAnalysis(DashboardError):
    """An analysis_result payload could not be parsed."""
