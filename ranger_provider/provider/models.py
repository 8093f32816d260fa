"""Configuration/state models for the provider's resource and data source.

These models mirror the declared schema the host sees. Attribute names are
the schema attribute names; defaults are the schema defaults the host applies
to the plan. Computed attributes the host has not resolved yet (unknown) are
`None`.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator

from ranger_provider.schemas.base import ConfigSchema

# Fixed processing order of the resource-type keys.
RESOURCE_TYPES = ("topic", "database", "table", "url", "hiveservice", "global", "udf", "column")

# Validation context for desired configuration; stored state skips plan-only rules.
PLAN_CONTEXT = {"plan": True}


class AccessModel(ConfigSchema):
    type: str = Field(..., description="The type of access such as 'publish', 'consume', etc.")
    is_allowed: bool = Field(default=True, description="If true, the access is allowed; if false, it is denied.")


class PolicyItemModel(ConfigSchema):
    accesses: List[AccessModel] = Field(
        ...,
        description="List of accesses that define the permissions granted by this policy item.",
        json_schema_extra={"minItems": 1},
    )
    users: Optional[List[str]] = Field(default=None, description="List of users to which this policy applies.")
    groups: Optional[List[str]] = Field(default=None, description="List of groups to which this policy applies.")
    delegate_admin: bool = Field(default=False, description="If true, allows the user to delegate admin privileges.")

    @field_validator("accesses")
    @classmethod
    def _plan_needs_an_access(cls, v: List[AccessModel], info: ValidationInfo) -> List[AccessModel]:
        # Ranger may return items without accesses; only a plan must declare one
        if info.context and info.context.get("plan") and not v:
            raise ValueError("a policy item needs at least one access")
        return v


class ResourceTypeModel(ConfigSchema):
    values: List[str] = Field(..., description="List of resource values.")
    is_excludes: bool = Field(
        default=False,
        description="If true, the policy applies to all resources except those specified in the values list.",
    )
    is_recursive: bool = Field(default=False, description="If true, the policy applies recursively to sub-resources.")


class ResourcesModel(ConfigSchema):
    """Optional selector per resource type; `None` means the dimension is not constrained."""

    # Kafka resources
    topic: Optional[ResourceTypeModel] = None
    # Hive resources
    database: Optional[ResourceTypeModel] = None
    table: Optional[ResourceTypeModel] = None
    url: Optional[ResourceTypeModel] = None
    hiveservice: Optional[ResourceTypeModel] = None
    global_: Optional[ResourceTypeModel] = Field(default=None, alias="global")
    udf: Optional[ResourceTypeModel] = None
    column: Optional[ResourceTypeModel] = None

    def get(self, resource_type: str) -> Optional[ResourceTypeModel]:
        return getattr(self, field_name(resource_type))

    def set(self, resource_type: str, value: Optional[ResourceTypeModel]) -> None:
        setattr(self, field_name(resource_type), value)


class PolicyResourceModel(ConfigSchema):
    """Desired or observed state of one Ranger policy."""

    id: Optional[int] = Field(default=None, description="The ID of the policy.")
    guid: Optional[str] = Field(default=None, description="The GUID of the policy.")
    name: str = Field(..., description="The name of the policy.")
    description: Optional[str] = Field(default=None, description="A description of the policy.")
    service: str = Field(..., description="The name of the service this policy applies to.")
    resources: ResourcesModel = Field(..., description="Resources to which the policy applies.")
    is_audit_enabled: bool = Field(default=True, description="Enable or disable audit logging for this policy.")
    is_enabled: bool = Field(default=True, description="Enable or disable this policy.")
    version: Optional[int] = Field(default=None, description="The version of the policy.")
    policy_type: int = Field(
        default=0,
        description="The type of the policy. This is typically used to differentiate between different policy types in Ranger.",
    )
    policy_priority: int = Field(
        default=0, description="The priority of the policy. Policies with lower numbers are evaluated first."
    )
    is_deny_all_else: bool = Field(
        default=False,
        description="If true, this policy denies all other access not explicitly allowed by other policies.",
    )
    service_type: Optional[str] = Field(
        default=None, description="The type of service this policy applies to, such as 'kafka'."
    )
    policy_items: Optional[List[PolicyItemModel]] = Field(
        default=None, description="List of policy items that define the access controls for this policy."
    )


class ServiceModel(ConfigSchema):
    """Service data source state."""

    id: Optional[int] = Field(default=None, description="Identifier for this service.")
    name: str = Field(..., description="Name of the service.")


class ProviderConfigModel(ConfigSchema):
    """Provider block configuration; unset values fall back to the environment."""

    host: Optional[str] = Field(
        default=None, description="URI for Ranger API. May also be provided via RANGER_HOST environment variable."
    )
    username: Optional[str] = Field(
        default=None, description="Username for Ranger API. May also be provided via RANGER_USERNAME environment variable."
    )
    password: Optional[str] = Field(
        default=None,
        description="Password for Ranger API. May also be provided via RANGER_PASSWORD environment variable.",
        json_schema_extra={"sensitive": True},
    )


def field_name(resource_type: str) -> str:
    """Model attribute holding `resource_type` ('global' is a Python keyword)."""
    if resource_type not in RESOURCE_TYPES:
        raise KeyError(resource_type)
    return "global_" if resource_type == "global" else resource_type
