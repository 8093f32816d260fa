"""Provider entry object.

`RangerProvider.configure` resolves the connection settings (provider block
first, environment second), validates that all three are present and builds
the `RangerApiClient` that resources and data sources are bound to.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type

import httpx

from ranger_provider.core.config import Settings
from ranger_provider.core.diagnostics import Diagnostics, Result
from ranger_provider.core.logging_config import mask_secret
from ranger_provider.ranger_api.client import RangerApiClient

from .base import load_model
from .models import ProviderConfigModel
from .policy_resource import PolicyResource
from .service_data_source import ServiceDataSource

logger = logging.getLogger(__name__)

# attribute -> (label, environment variable)
_CONNECTION_ATTRIBUTES = (
    ("host", "Host", "RANGER_HOST"),
    ("username", "Username", "RANGER_USERNAME"),
    ("password", "Password", "RANGER_PASSWORD"),
)


class RangerProvider:
    """Provider implementation for Apache Ranger.

    Args:
        version: Provider version; "dev" for local builds, "test" under acceptance tests.
        settings: Environment-backed settings; loaded lazily when omitted.
        http_client: Optional pre-built `httpx.Client` handed to the API client.
    """

    type_name = "ranger"

    def __init__(
        self,
        version: str = "dev",
        *,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.version = version
        self._settings = settings
        self._http_client = http_client

    def metadata(self) -> Dict[str, str]:
        return {"type_name": self.type_name, "version": self.version}

    @staticmethod
    def schema() -> Dict[str, Any]:
        return ProviderConfigModel.model_json_schema(by_alias=True)

    def configure(self, config: Any = None) -> Result[RangerApiClient]:
        logger.info("Configuring Ranger client")
        diags = Diagnostics()
        if config is None:
            config = ProviderConfigModel()
        model = load_model(ProviderConfigModel, config, diags, "Ranger Provider Config")
        if model is None:
            return Result.failure(diags)

        connection = (self._settings or Settings()).ranger
        # Default values to environment variables, but override with configuration values if set.
        resolved = {
            "host": connection.host,
            "username": connection.username,
            "password": connection.password,
        }
        for attribute, _, _ in _CONNECTION_ATTRIBUTES:
            value = getattr(model, attribute)
            if value is not None:
                resolved[attribute] = value

        for attribute, label, env_var in _CONNECTION_ATTRIBUTES:
            if not resolved[attribute]:
                diags.add_attribute_error(
                    attribute,
                    f"Missing Ranger {label}",
                    f"The provider cannot create the Ranger client as there is a missing or empty value for the "
                    f"Ranger {attribute}. Set the {attribute} value in the configuration or use the {env_var} "
                    "environment variable. If either is already set, ensure the value is not empty.",
                )
        if diags.has_error():
            return Result.failure(diags)

        logger.debug(
            "Creating Ranger client ranger_host=%s ranger_username=%s ranger_password=%s",
            resolved["host"],
            resolved["username"],
            mask_secret(resolved["password"]),
        )
        client = RangerApiClient(
            resolved["host"],
            username=resolved["username"],
            password=resolved["password"],
            timeout=connection.request_timeout_seconds,
            client=self._http_client,
        )
        logger.info("Configured Ranger client host=%s", resolved["host"])
        return Result(value=client, diagnostics=diags)

    def resources(self) -> List[Type[PolicyResource]]:
        return [PolicyResource]

    def data_sources(self) -> List[Type[ServiceDataSource]]:
        return [ServiceDataSource]
