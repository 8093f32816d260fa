from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from .errors import RangerApiError, RangerPolicyNotFoundError
from .models import PolicyDTO, ServiceDTO, ServicesListPayloadDTO


@runtime_checkable
class PolicyApi(Protocol):
    """Operations the provider needs from a Ranger API client."""

    def create_policy(self, policy: PolicyDTO) -> PolicyDTO: ...

    def get_policy(self, policy_id: int) -> PolicyDTO: ...

    def update_policy(self, policy: PolicyDTO) -> PolicyDTO: ...

    def delete_policy(self, policy_id: int) -> None: ...

    def get_services(self) -> List[ServiceDTO]: ...


class RangerApiClient:
    """
    Thin HTTP client for the Apache Ranger Admin public REST API (v2).

    Responsibilities:
    - create_policy / get_policy / update_policy / delete_policy
    - get_services

    Note: Every failure (HTTP status, transport, malformed body) is raised as
    `RangerApiError`. No retries are attempted here.
    """

    API_PREFIX = "/service/public/v2/api"

    def __init__(
        self,
        base_url: str,
        *,
        username: str,
        password: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.username = username
        self._auth = httpx.BasicAuth(username, password)
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", "Accept": "application/json"}

    def _url(self, path: str) -> str:
        return f"{self.base_url}{self.API_PREFIX}{path}"

    def _send(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            self._logger.debug("RangerApiClient.%s: %s %s", operation, method, url)
            r = self._client.request(method, url, headers=self._headers(), auth=self._auth, **kwargs)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RangerApiError(
                f"Ranger {operation} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.RequestError as e:
            raise RangerApiError(f"Ranger {operation} failed: {e}") from e
        return r

    def _parse_policy(self, operation: str, r: httpx.Response) -> PolicyDTO:
        try:
            data = r.json()
        except ValueError as e:
            raise RangerApiError(
                f"Ranger {operation} returned a non-JSON body", status_code=r.status_code, details=r.text
            ) from e
        if not isinstance(data, dict):
            raise RangerApiError(
                f"Unexpected response shape from {operation}", status_code=r.status_code, details=data
            )
        try:
            return PolicyDTO.model_validate(data)
        except ValidationError as e:
            raise RangerApiError(
                f"Unexpected response shape from {operation}", status_code=r.status_code, details=str(e)
            ) from e

    def create_policy(self, policy: PolicyDTO) -> PolicyDTO:
        payload = policy.to_payload()
        r = self._send("create_policy", "POST", "/policy", json=payload)
        created = self._parse_policy("create_policy", r)
        self._logger.debug("RangerApiClient.create_policy: created id=%s name=%s", created.id, created.name)
        return created

    def get_policy(self, policy_id: int) -> PolicyDTO:
        try:
            r = self._send("get_policy", "GET", f"/policy/{policy_id}")
        except RangerApiError as e:
            if e.status_code == 404:
                raise RangerPolicyNotFoundError(policy_id) from e
            raise
        policy = self._parse_policy("get_policy", r)
        self._logger.debug("RangerApiClient.get_policy: resolved id=%s version=%s", policy.id, policy.version)
        return policy

    def update_policy(self, policy: PolicyDTO) -> PolicyDTO:
        if policy.id is None:
            raise RangerApiError("Ranger update_policy requires a policy id")
        r = self._send("update_policy", "PUT", f"/policy/{policy.id}", json=policy.to_payload())
        updated = self._parse_policy("update_policy", r)
        self._logger.debug("RangerApiClient.update_policy: id=%s version=%s", updated.id, updated.version)
        return updated

    def delete_policy(self, policy_id: int) -> None:
        self._send("delete_policy", "DELETE", f"/policy/{policy_id}")
        self._logger.debug("RangerApiClient.delete_policy: deleted id=%s", policy_id)

    def get_services(self) -> List[ServiceDTO]:
        r = self._send("get_services", "GET", "/service")
        try:
            payload = ServicesListPayloadDTO.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            raise RangerApiError(
                "Unexpected response shape from get_services", status_code=r.status_code, details=r.text
            ) from e
        self._logger.debug("RangerApiClient.get_services: got %d services", len(payload.items))
        return payload.items
