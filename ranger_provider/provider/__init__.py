"""Ranger provider: resource, data source and the mapping between them and Ranger.

Subpackages/modules:
    models: configuration/state models matching the declared schema.
    mapper: conversion between configuration models and Ranger wire DTOs.
    policy_resource: lifecycle of `ranger_policy`.
    service_data_source: lookup behind `ranger_service`.
    provider: provider configuration and client construction.
"""

from .mapper import apply_policy_to_plan, config_to_policy, policy_to_config
from .models import (
    RESOURCE_TYPES,
    AccessModel,
    PolicyItemModel,
    PolicyResourceModel,
    ProviderConfigModel,
    ResourcesModel,
    ResourceTypeModel,
    ServiceModel,
)
from .policy_resource import PolicyResource
from .provider import RangerProvider
from .service_data_source import ServiceDataSource

__all__ = [
    "RESOURCE_TYPES",
    "AccessModel",
    "PolicyItemModel",
    "PolicyResource",
    "PolicyResourceModel",
    "ProviderConfigModel",
    "RangerProvider",
    "ResourcesModel",
    "ResourceTypeModel",
    "ServiceDataSource",
    "ServiceModel",
    "apply_policy_to_plan",
    "config_to_policy",
    "policy_to_config",
]
