"""Lifecycle of the `ranger_policy` resource.

Each operation loads the host's plan/state, maps it with
`ranger_provider.provider.mapper`, performs exactly one Ranger API call and
returns a `Result`. On any error the result carries diagnostics only, so the
host keeps its pre-operation copy of the state.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ranger_provider.core.diagnostics import Diagnostics, Result
from ranger_provider.ranger_api.errors import RangerApiError, RangerPolicyNotFoundError

from .base import ClientBoundMixin, load_model
from .mapper import apply_policy_to_plan, config_to_policy, policy_to_config, resource_types
from .models import PLAN_CONTEXT, PolicyResourceModel

logger = logging.getLogger(__name__)


class PolicyResource(ClientBoundMixin):
    """Create, read, update and delete Ranger policies."""

    kind = "Resource"
    type_suffix = "_policy"

    @staticmethod
    def schema() -> Dict[str, Any]:
        return PolicyResourceModel.model_json_schema(by_alias=True)

    def create(self, plan: Any) -> Result[PolicyResourceModel]:
        diags = Diagnostics()
        model = load_model(PolicyResourceModel, plan, diags, "Ranger Policy Plan", context=PLAN_CONTEXT)
        if model is None:
            return Result.failure(diags)

        policy = config_to_policy(model)
        logger.info(
            "Creating Ranger policy name=%s service=%s resources=%s",
            model.name,
            model.service,
            resource_types(model.resources),
        )
        try:
            created = self.client.create_policy(policy)
        except RangerApiError as e:
            diags.add_error(
                "Error creating policy",
                "Could not create policy, unexpected error: " + e.describe(),
            )
            return Result.failure(diags)

        apply_policy_to_plan(model, created)
        logger.debug("Created Ranger policy id=%s guid=%s version=%s", model.id, model.guid, model.version)
        return Result(value=model, diagnostics=diags)

    def read(self, state: Any) -> Result[PolicyResourceModel]:
        diags = Diagnostics()
        current = load_model(PolicyResourceModel, state, diags, "Ranger Policy State")
        if current is None:
            return Result.failure(diags)
        if current.id is None:
            diags.add_error("Error Reading Ranger policy", "Could not read policy: the state has no policy ID.")
            return Result.failure(diags)

        logger.debug("Refreshing Ranger policy id=%s", current.id)
        try:
            policy = self.client.get_policy(current.id)
        except RangerPolicyNotFoundError:
            diags.add_warning(
                "Ranger policy not found",
                f"Policy ID {current.id} no longer exists in Ranger and will be removed from state.",
            )
            logger.info("Ranger policy id=%s not found, dropping it from state", current.id)
            return Result(value=None, diagnostics=diags)
        except RangerApiError as e:
            diags.add_error(
                "Error Reading Ranger policy",
                f"Could not read policy ID {current.id}: {e.describe()}",
            )
            return Result.failure(diags)

        return Result(value=policy_to_config(policy), diagnostics=diags)

    def update(self, plan: Any, state: Any) -> Result[PolicyResourceModel]:
        diags = Diagnostics()
        model = load_model(PolicyResourceModel, plan, diags, "Ranger Policy Plan", context=PLAN_CONTEXT)
        prior = load_model(PolicyResourceModel, state, diags, "Ranger Policy State")
        if model is None or prior is None:
            return Result.failure(diags)

        policy = config_to_policy(model)
        policy.id = prior.id
        logger.info(
            "Updating Ranger policy id=%s name=%s resources=%s",
            prior.id,
            model.name,
            resource_types(model.resources),
        )
        try:
            updated = self.client.update_policy(policy)
        except RangerApiError as e:
            diags.add_error(
                "Error updating Ranger policy",
                f"Could not update policy ID {prior.id}: {e.describe()}",
            )
            return Result.failure(diags)

        apply_policy_to_plan(model, updated)
        logger.debug("Updated Ranger policy id=%s version=%s", model.id, model.version)
        return Result(value=model, diagnostics=diags)

    def delete(self, state: Any) -> Result[None]:
        diags = Diagnostics()
        current = load_model(PolicyResourceModel, state, diags, "Ranger Policy State")
        if current is None:
            return Result.failure(diags)
        if current.id is None:
            diags.add_error("Error Deleting Ranger policy", "Could not delete policy: the state has no policy ID.")
            return Result.failure(diags)

        logger.info("Deleting Ranger policy id=%s", current.id)
        try:
            self.client.delete_policy(current.id)
        except RangerApiError as e:
            diags.add_error(
                "Error Deleting Ranger policy",
                "Could not delete policy, unexpected error: " + e.describe(),
            )
            return Result.failure(diags)
        return Result(value=None, diagnostics=diags)
