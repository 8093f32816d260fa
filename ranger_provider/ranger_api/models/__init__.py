"""Ranger API models.

Re-exports the DTOs (e.g., `PolicyDTO`, `ResourcesDTO`, `ServiceDTO`,
`ServicesListPayloadDTO`) consumed by `RangerApiClient` and the mapper.
"""

from ranger_provider.ranger_api.models.dto import (
    AccessDTO,
    PolicyDTO,
    PolicyItemDTO,
    ResourcesDTO,
    ResourceTypeDTO,
    ServiceDTO,
    ServicesListPayloadDTO,
)

__all__ = [
    "AccessDTO",
    "PolicyDTO",
    "PolicyItemDTO",
    "ResourcesDTO",
    "ResourceTypeDTO",
    "ServiceDTO",
    "ServicesListPayloadDTO",
]
