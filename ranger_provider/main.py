"""
Provider Entry Point.

The host runtime obtains the provider through `create_provider()`, which
configures logging from the environment before anything else runs. Running
the `ranger-provider` console script prints the provider metadata and the
declared schemas as JSON, with logs going to stderr.
"""

import json
from typing import Any, Dict, Optional

import httpx

from ranger_provider import __version__
from ranger_provider.core.config import Settings
from ranger_provider.core.logging_config import get_logger, setup_logging
from ranger_provider.provider.provider import RangerProvider

logger = get_logger(__name__)


def create_provider(
    version: str = __version__,
    *,
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.Client] = None,
) -> RangerProvider:
    """Set up logging and build the provider the host talks to."""
    settings = settings or Settings()
    setup_logging(settings=settings)
    logger.info("Starting Ranger provider version=%s", version)
    return RangerProvider(version, settings=settings, http_client=http_client)


def describe(provider: RangerProvider) -> Dict[str, Any]:
    type_name = provider.type_name
    return {
        "provider": provider.metadata(),
        "schema": provider.schema(),
        "resources": {r.metadata(type_name): r.schema() for r in provider.resources()},
        "data_sources": {d.metadata(type_name): d.schema() for d in provider.data_sources()},
    }


def main() -> None:
    provider = create_provider()
    print(json.dumps(describe(provider), indent=2))


if __name__ == "__main__":
    main()
