"""Ranger API DTO models

Pydantic models that define the request/response contracts for the Ranger
public REST API (v2). These DTOs centralize serialization/deserialization;
conversion to and from the provider's configuration models lives in
`ranger_provider.provider.mapper`.

Guidelines:
- Keep alias mappings aligned with the Ranger JSON (e.g., isExcludes, policyItems).
- Fields the provider does not manage (createdBy, denyPolicyItems, ...) are ignored on read.
- `None` means "not sent"; `WireSchema.to_payload()` drops such fields.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from ranger_provider.schemas.base import WireSchema


class AccessDTO(WireSchema):
    """A single access grant inside a policy item.

    Examples:
        >>> AccessDTO(type="publish").to_payload()
        {'type': 'publish', 'isAllowed': True}
    """
    type: str = Field(..., description="Access type such as 'publish', 'consume', 'select'.", examples=["publish"])
    is_allowed: bool = Field(default=True, description="Whether the access is allowed (true) or denied (false).")


class PolicyItemDTO(WireSchema):
    """One policy item: a set of accesses granted to users and/or groups.

    `users` and `groups` stay `None` when the caller did not specify them so
    that "not specified" is never sent as an empty list.
    """
    accesses: Optional[List[AccessDTO]] = Field(default=None, description="Accesses granted by this item.")
    users: Optional[List[str]] = Field(default=None, description="Users this item applies to.")
    groups: Optional[List[str]] = Field(default=None, description="Groups this item applies to.")
    delegate_admin: bool = Field(default=False, description="Allow grantees to administer this policy.")


class ResourceTypeDTO(WireSchema):
    """Pattern-based selector for one resource type (e.g. Kafka topics)."""
    values: List[str] = Field(default_factory=list, description="Resource name patterns.", examples=[["topic-*"]])
    is_excludes: bool = Field(default=False, description="Match everything except the listed values.")
    is_recursive: bool = Field(default=False, description="Apply the match recursively.")


class ResourcesDTO(WireSchema):
    """Keyed resource selectors of a policy; absent keys are omitted from the JSON."""
    topic: Optional[ResourceTypeDTO] = None
    database: Optional[ResourceTypeDTO] = None
    table: Optional[ResourceTypeDTO] = None
    url: Optional[ResourceTypeDTO] = None
    hiveservice: Optional[ResourceTypeDTO] = None
    global_: Optional[ResourceTypeDTO] = Field(default=None, alias="global")
    udf: Optional[ResourceTypeDTO] = None
    column: Optional[ResourceTypeDTO] = None


class PolicyDTO(WireSchema):
    """Policy resource as exchanged with Ranger Admin.

    Examples:
        A trimmed policy object returned by ``GET /service/public/v2/api/policy/{id}``:

        {
            'id': 12,
            'guid': '7d2b0c4e-5a0b-4c1e-9d76-2f1f8a5e0c11',
            'isEnabled': true,
            'isAuditEnabled': true,
            'version': 1,
            'service': 'dev_kafka',
            'name': 'test-policy',
            'policyType': 0,
            'policyPriority': 0,
            'resources': {'topic': {'values': ['topic-*'], 'isExcludes': false, 'isRecursive': false}},
            'policyItems': [{'accesses': [{'type': 'publish', 'isAllowed': true}], 'users': ['alice'],
                             'delegateAdmin': false}],
            'serviceType': 'kafka',
            'isDenyAllElse': false
        }

    References:
        - Built from configuration by `mapper.config_to_policy`.
        - Consumed by `RangerApiClient.create_policy` / `update_policy`.
    """
    id: Optional[int] = Field(default=None, description="Server-assigned numeric identifier.")
    guid: Optional[str] = Field(default=None, description="Server-assigned globally unique identifier.")
    name: str = Field(..., description="Policy name, unique within the service.")
    description: Optional[str] = Field(default=None, description="Free-form policy description.")
    service: str = Field(..., description="Name of the Ranger service the policy belongs to.")
    service_type: Optional[str] = Field(default=None, description="Type of the service, e.g. 'kafka' or 'hive'.")
    resources: ResourcesDTO = Field(default_factory=ResourcesDTO, description="Resource selectors.")
    is_audit_enabled: bool = Field(default=True, description="Whether access through this policy is audited.")
    is_enabled: bool = Field(default=True, description="Whether the policy is active.")
    version: Optional[int] = Field(default=None, description="Server-assigned version, bumped on every update.")
    policy_type: int = Field(default=0, description="Ranger policy type (0 = access).")
    policy_priority: int = Field(default=0, description="Evaluation priority (0 = normal).")
    is_deny_all_else: bool = Field(default=False, description="Deny all accesses not explicitly granted.")
    policy_items: Optional[List[PolicyItemDTO]] = Field(default=None, description="Allow policy items.")


class ServiceDTO(WireSchema):
    """Service definition entry returned by the service list endpoint."""
    id: int = Field(default=0, description="Numeric service identifier (0 when missing).")
    name: str = Field(default="", description="Service name, e.g. 'dev_kafka'.")
    type: Optional[str] = Field(default=None, description="Service type, e.g. 'kafka'.")
    description: Optional[str] = None
    is_enabled: Optional[bool] = None


class ServicesListPayloadDTO(WireSchema):
    """Normalizes the service list response.

    Ranger answers ``GET /service/public/v2/api/service`` with a bare JSON
    array; the legacy endpoint wraps it as ``{"services": [...]}``.
    """
    items: List[ServiceDTO]

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, v):
        if isinstance(v, list):
            return {"items": v}
        if isinstance(v, dict):
            if isinstance(v.get("items"), list):
                return v
            if isinstance(v.get("services"), list):
                nv = dict(v)
                nv["items"] = nv.pop("services")
                return nv
        return v
