from ranger_provider.ranger_api.models import (
    AccessDTO,
    PolicyDTO,
    PolicyItemDTO,
    ResourcesDTO,
    ResourceTypeDTO,
    ServiceDTO,
)

from .client import PolicyApi, RangerApiClient
from .errors import RangerApiError, RangerPolicyNotFoundError, RangerServiceNotFoundError

__all__ = [
    "AccessDTO",
    "PolicyApi",
    "PolicyDTO",
    "PolicyItemDTO",
    "RangerApiClient",
    "RangerApiError",
    "RangerPolicyNotFoundError",
    "RangerServiceNotFoundError",
    "ResourcesDTO",
    "ResourceTypeDTO",
    "ServiceDTO",
]
