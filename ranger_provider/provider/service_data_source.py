from __future__ import annotations

import logging
from typing import Any, Dict

from ranger_provider.core.diagnostics import Diagnostics, Result
from ranger_provider.ranger_api.errors import RangerApiError, RangerServiceNotFoundError
from ranger_provider.ranger_api.models import ServiceDTO

from .base import ClientBoundMixin, load_model
from .models import ServiceModel

logger = logging.getLogger(__name__)


class ServiceDataSource(ClientBoundMixin):
    """Read-only lookup of a Ranger service by name (`ranger_service`)."""

    kind = "Data Source"
    type_suffix = "_service"

    @staticmethod
    def schema() -> Dict[str, Any]:
        return ServiceModel.model_json_schema(by_alias=True)

    def find_service_by_name(self, name: str) -> ServiceDTO:
        """Return the first service whose name equals `name` exactly.

        Raises:
            RangerServiceNotFoundError: no match, or the match carries id 0.
            RangerApiError: the service list could not be fetched.
        """
        services = self.client.get_services()
        match = next((s for s in services if s.name == name), None)
        if match is None or match.id == 0:
            raise RangerServiceNotFoundError(name)
        return match

    def read(self, config: Any) -> Result[ServiceModel]:
        diags = Diagnostics()
        query = load_model(ServiceModel, config, diags, "Ranger Service Config")
        if query is None:
            return Result.failure(diags)

        try:
            service = self.find_service_by_name(query.name)
        except RangerServiceNotFoundError as e:
            diags.add_error("Service Not Found", str(e))
            return Result.failure(diags)
        except RangerApiError as e:
            diags.add_error("Unable to Read Ranger Services", e.describe())
            return Result.failure(diags)

        logger.debug("Resolved Ranger service name=%s id=%s", service.name, service.id)
        return Result(value=ServiceModel(id=service.id, name=service.name), diagnostics=diags)
