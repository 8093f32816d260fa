"""Conversion between configuration models and Ranger wire models.

Presence rules shared by every conversion:

- A resource type whose selector is `None` is omitted, never sent or
  stored as an empty selector.
- `users` / `groups` / `policy_items` that are `None` stay `None`; an
  explicit empty list stays an empty list.
- An empty description is absent in both directions.
- id, guid and version are server-assigned and never sent on create.

Resource types are always visited in `RESOURCE_TYPES` order. The functions
here do not validate; schema validation happens when the models are built.
"""

from __future__ import annotations

from typing import List, Optional

from ranger_provider.ranger_api.models import (
    AccessDTO,
    PolicyDTO,
    PolicyItemDTO,
    ResourcesDTO,
    ResourceTypeDTO,
)

from .models import (
    RESOURCE_TYPES,
    AccessModel,
    PolicyItemModel,
    PolicyResourceModel,
    ResourcesModel,
    ResourceTypeModel,
    field_name,
)


def _copy_list(values: Optional[List[str]]) -> Optional[List[str]]:
    return None if values is None else list(values)


# ---------------------------------------------------------------------
# configuration -> wire
# ---------------------------------------------------------------------


def _resources_to_dto(resources: ResourcesModel) -> ResourcesDTO:
    dto = ResourcesDTO()
    for resource_type in RESOURCE_TYPES:
        selector = resources.get(resource_type)
        if selector is None:
            continue
        setattr(
            dto,
            field_name(resource_type),
            ResourceTypeDTO(
                values=list(selector.values),
                is_excludes=selector.is_excludes,
                is_recursive=selector.is_recursive,
            ),
        )
    return dto


def _item_to_dto(item: PolicyItemModel) -> PolicyItemDTO:
    return PolicyItemDTO(
        accesses=[AccessDTO(type=a.type, is_allowed=a.is_allowed) for a in item.accesses],
        users=_copy_list(item.users),
        groups=_copy_list(item.groups),
        delegate_admin=item.delegate_admin,
    )


def config_to_policy(config: PolicyResourceModel) -> PolicyDTO:
    """Build the request body for create/update from a plan."""
    policy = PolicyDTO(
        name=config.name,
        service=config.service,
        resources=_resources_to_dto(config.resources),
        is_audit_enabled=config.is_audit_enabled,
        is_enabled=config.is_enabled,
        policy_type=int(config.policy_type),
        policy_priority=int(config.policy_priority),
        is_deny_all_else=config.is_deny_all_else,
    )
    if config.description:
        policy.description = config.description
    if config.service_type:
        policy.service_type = config.service_type
    if config.policy_items is not None:
        policy.policy_items = [_item_to_dto(item) for item in config.policy_items]
    return policy


# ---------------------------------------------------------------------
# wire -> configuration
# ---------------------------------------------------------------------


def _resources_from_dto(dto: ResourcesDTO) -> ResourcesModel:
    resources = ResourcesModel()
    for resource_type in RESOURCE_TYPES:
        selector = getattr(dto, field_name(resource_type))
        if selector is None:
            continue
        resources.set(
            resource_type,
            ResourceTypeModel(
                values=list(selector.values),
                is_excludes=selector.is_excludes,
                is_recursive=selector.is_recursive,
            ),
        )
    return resources


def _item_from_dto(item: PolicyItemDTO) -> PolicyItemModel:
    return PolicyItemModel(
        accesses=[AccessModel(type=a.type, is_allowed=a.is_allowed) for a in item.accesses or []],
        users=_copy_list(item.users),
        groups=_copy_list(item.groups),
        delegate_admin=item.delegate_admin,
    )


def _items_from_dto(items: Optional[List[PolicyItemDTO]]) -> Optional[List[PolicyItemModel]]:
    if items is None:
        return None
    return [_item_from_dto(item) for item in items]


def policy_to_config(policy: PolicyDTO) -> PolicyResourceModel:
    """Build a complete state value from a policy returned by Ranger."""
    return PolicyResourceModel(
        id=policy.id,
        guid=policy.guid,
        name=policy.name,
        description=policy.description or None,
        service=policy.service,
        resources=_resources_from_dto(policy.resources),
        is_audit_enabled=policy.is_audit_enabled,
        is_enabled=policy.is_enabled,
        version=policy.version,
        policy_type=policy.policy_type,
        policy_priority=policy.policy_priority,
        is_deny_all_else=policy.is_deny_all_else,
        service_type=policy.service_type,
        policy_items=_items_from_dto(policy.policy_items),
    )


def apply_policy_to_plan(plan: PolicyResourceModel, policy: PolicyDTO) -> None:
    """Write the server's view of the policy into `plan` in place."""
    plan.id = policy.id
    plan.guid = policy.guid
    plan.name = policy.name
    plan.service = policy.service
    plan.version = policy.version
    plan.is_enabled = policy.is_enabled
    plan.is_audit_enabled = policy.is_audit_enabled
    plan.policy_type = policy.policy_type
    plan.policy_priority = policy.policy_priority
    plan.is_deny_all_else = policy.is_deny_all_else
    plan.description = policy.description or None
    plan.service_type = policy.service_type or None
    plan.resources = _resources_from_dto(policy.resources)
    plan.policy_items = _items_from_dto(policy.policy_items)


def resource_types(resources: ResourcesModel) -> List[str]:
    """Populated resource-type keys, in fixed order."""
    return [t for t in RESOURCE_TYPES if resources.get(t) is not None]
