"""Ranger provider.

Lets declarative infrastructure configuration manage Apache Ranger access
policies and look up Ranger services, through the Ranger Admin REST API.

High-level architecture
-----------------------

- ``provider``: configuration models, the model <-> wire mapper, and the
  ``ranger_policy`` resource / ``ranger_service`` data source lifecycles.
- ``ranger_api``: thin httpx client and DTOs for the Ranger public API.
- ``core``: settings, logging setup and the diagnostics/result types
  returned to the host runtime.
"""

__version__ = "0.1.0"

from ranger_provider.provider import PolicyResource, RangerProvider, ServiceDataSource

__all__ = ["PolicyResource", "RangerProvider", "ServiceDataSource", "__version__"]
