"""Error types specific to the Ranger API layer.

Purpose:
- Provide typed exceptions thrown by `RangerApiClient` and the lookups built
  on top of it.
- Expose HTTP-oriented context (e.g., status code, error body) for diagnosis.

Usage:
- Catch `RangerApiError` for general failures and inspect `status_code` or
  `details`.
- Catch `RangerPolicyNotFoundError` when a policy lookup by ID returns 404.
- Catch `RangerServiceNotFoundError` when no service matches a name.
"""

from __future__ import annotations

from typing import Any, Optional


class RangerApiError(Exception):
    """Base error for Ranger API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional payload from the server (e.g., the error body).
    """
    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def describe(self) -> str:
        """Message followed by the server-provided details, when there are any."""
        if self.details:
            return f"{self} ({self.details})"
        return str(self)


class RangerPolicyNotFoundError(RangerApiError):
    """Raised when the requested policy cannot be found (HTTP 404).

    Args:
        policy_id: The policy identifier that was not found.
    """
    def __init__(self, policy_id: int) -> None:
        super().__init__(f"Ranger policy not found: {policy_id}", status_code=404)
        self.policy_id = policy_id


class RangerServiceNotFoundError(RangerApiError):
    """Raised when no service with the requested name exists.

    Args:
        name: The service name that was queried.
    """
    def __init__(self, name: str) -> None:
        super().__init__(f"Service with name '{name}' not found.")
        self.name = name
