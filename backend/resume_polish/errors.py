"""
Error taxonomy for the polish service.
Every failure a polish call can hit is one of these; the HTTP layer maps them
to 500 responses.
"""
from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    CONFIG_MISSING = "config_missing"
    REMOTE_UNAVAILABLE = "remote_unavailable"
    REMOTE_REJECTED = "remote_rejected"
    REMOTE_MALFORMED = "remote_malformed"


class ServiceError(Exception):
    kind: ErrorKind


class ConfigMissing(ServiceError):
    """Required AI_* settings were absent (or unusable) at startup."""

    kind = ErrorKind.CONFIG_MISSING

    def __init__(self, missing: List[str], message: Optional[str] = None):
        self.missing = list(missing)
        super().__init__(message or f"{', '.join(self.missing)} not configured in .env file")


class RemoteUnavailable(ServiceError):
    """The completion endpoint could not be reached (DNS, TLS, timeout...)."""

    kind = ErrorKind.REMOTE_UNAVAILABLE

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"AI API request failed: {reason}")


class RemoteRejected(ServiceError):
    """The completion endpoint answered with a non-2xx status."""

    kind = ErrorKind.REMOTE_REJECTED

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"AI API error: {status_code} - {body}")


class RemoteMalformed(ServiceError):
    kind = ErrorKind.REMOTE_MALFORMED

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to parse AI response: {reason}")
