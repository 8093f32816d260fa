from __future__ import annotations

import base64
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from ranger_provider.ranger_api.client import RangerApiClient

API = "/service/public/v2/api"
USERNAME = "admin"
PASSWORD = "rangerR0cks!"


class FakeRanger:
    """In-memory Ranger Admin exposing the policy and service endpoints.

    Mirrors the behaviour the provider relies on: ids/guids/versions are
    assigned by the server, `serviceType` is derived from the service, the
    version is bumped on every update and unknown attributes are echoed back.
    """

    def __init__(self) -> None:
        self.services: List[Dict[str, Any]] = [
            {"id": 6, "name": "dev_kafka", "type": "kafka", "isEnabled": True},
            {"id": 7, "name": "dev_hive", "type": "hive", "isEnabled": True},
        ]
        self.policies: Dict[int, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.fail_with: Optional[int] = None
        self._next_id = 100

    def _authorized(self, request: httpx.Request) -> bool:
        expected = "Basic " + base64.b64encode(f"{USERNAME}:{PASSWORD}".encode()).decode()
        return request.headers.get("Authorization") == expected

    def _service_type(self, name: str) -> str:
        for s in self.services:
            if s["name"] == name:
                return s["type"]
        return ""

    def _stored(self, body: Dict[str, Any], policy_id: int, version: int) -> Dict[str, Any]:
        stored = dict(body)
        stored["id"] = policy_id
        stored["guid"] = f"guid-{policy_id}"
        stored["version"] = version
        stored["serviceType"] = self._service_type(body["service"])
        stored.setdefault("isEnabled", True)
        stored.setdefault("isAuditEnabled", True)
        stored.setdefault("policyType", 0)
        stored.setdefault("policyPriority", 0)
        stored.setdefault("isDenyAllElse", False)
        stored.setdefault("resources", {})
        for item in stored.get("policyItems") or []:
            for access in item.get("accesses") or []:
                access.setdefault("isAllowed", True)
        # attributes the provider does not manage
        stored["createdBy"] = "admin"
        stored["denyPolicyItems"] = []
        return stored

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._authorized(request):
            return httpx.Response(401, text="Authentication required")
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"msgDesc": "simulated failure"})

        path = request.url.path
        if request.method == "GET" and path == f"{API}/service":
            return httpx.Response(200, json=self.services)
        if request.method == "POST" and path == f"{API}/policy":
            body = json.loads(request.content)
            policy_id = self._next_id
            self._next_id += 1
            self.policies[policy_id] = self._stored(body, policy_id, 1)
            return httpx.Response(200, json=self.policies[policy_id])
        if path.startswith(f"{API}/policy/"):
            policy_id = int(path.rsplit("/", 1)[-1])
            if policy_id not in self.policies:
                return httpx.Response(404, json={"msgDesc": f"no policy found with id={policy_id}"})
            if request.method == "GET":
                return httpx.Response(200, json=self.policies[policy_id])
            if request.method == "PUT":
                body = json.loads(request.content)
                version = self.policies[policy_id]["version"] + 1
                self.policies[policy_id] = self._stored(body, policy_id, version)
                return httpx.Response(200, json=self.policies[policy_id])
            if request.method == "DELETE":
                del self.policies[policy_id]
                return httpx.Response(204)
        return httpx.Response(404, json={"msgDesc": "not found"})


@pytest.fixture()
def fake_ranger() -> FakeRanger:
    return FakeRanger()


@pytest.fixture()
def http_client(fake_ranger: FakeRanger) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(fake_ranger.handler), base_url="http://mock")


@pytest.fixture()
def ranger_client(http_client: httpx.Client) -> RangerApiClient:
    return RangerApiClient("http://mock", username=USERNAME, password=PASSWORD, client=http_client)


@pytest.fixture()
def credentials() -> tuple[str, str]:
    return USERNAME, PASSWORD
