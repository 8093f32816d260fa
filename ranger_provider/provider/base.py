from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional, Type, TypeVar

from pydantic import ValidationError

from ranger_provider.core.diagnostics import Diagnostics, Result
from ranger_provider.ranger_api.client import PolicyApi
from ranger_provider.schemas.base import ConfigSchema

M = TypeVar("M", bound=ConfigSchema)
C = TypeVar("C", bound="ClientBoundMixin")


class ClientBoundMixin:
    """Shared plumbing for resources and data sources bound to a Ranger client.

    Subclasses set `kind` ("Resource" / "Data Source") and `type_suffix`.
    """

    kind: ClassVar[str] = "Resource"
    type_suffix: ClassVar[str] = ""

    def __init__(self, client: PolicyApi) -> None:
        self.client = client

    @classmethod
    def from_provider_data(cls: Type[C], provider_data: Any) -> Result[C]:
        """Bind to the client the provider produced in `configure`.

        The host may bind before the provider is configured; `None` then yields
        an ok result with no value and the host binds again later.
        """
        diags = Diagnostics()
        if provider_data is None:
            return Result(value=None, diagnostics=diags)
        if not isinstance(provider_data, PolicyApi):
            diags.add_error(
                f"Unexpected {cls.kind} Configure Type",
                f"Expected RangerApiClient, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return Result.failure(diags)
        return Result(value=cls(provider_data))

    @classmethod
    def metadata(cls, provider_type_name: str) -> str:
        return provider_type_name + cls.type_suffix


def load_model(
    model_cls: Type[M],
    raw: Any,
    diags: Diagnostics,
    what: str,
    context: Optional[Dict[str, Any]] = None,
) -> Optional[M]:
    """Materialize host data as `model_cls`; the caller's value is never mutated.

    Model instances are re-validated as well, so `context` rules (such as the
    plan-only checks) apply no matter how the host hands the data over.
    """
    if isinstance(raw, model_cls):
        raw = raw.model_dump(by_alias=True)
    if isinstance(raw, dict):
        try:
            return model_cls.model_validate(raw, context=context)
        except ValidationError as e:
            diags.add_error(f"Invalid {what}", str(e))
            return None
    diags.add_error(
        f"Unexpected {what} Type",
        f"Expected {model_cls.__name__} or a mapping, got: {type(raw).__name__}.",
    )
    return None
