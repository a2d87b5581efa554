"""Generic serializers between WorkOS models and the wire format.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel

from .models.common import ListMetadata, ListResponse

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")


def serialize(model: BaseModel | None) -> dict[str, Any]:
    """Render a client-facing model as a wire dict.

    Unset fields are dropped and aliases become the wire names.

    Returns:
        The JSON-compatible payload.

    """
    if model is None:
        return {}
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def deserialize(model_cls: type[M], data: Any) -> M:
    """Build a client-facing model from a wire dict.

    Returns:
        The validated model.

    """
    return model_cls.model_validate(data)


def deserializer_for(model_cls: type[M]) -> Callable[[Any], M]:
    """Return a one-argument deserializer bound to ``model_cls``."""
    return model_cls.model_validate


def deserialize_list(
    data: dict[str, Any],
    deserializer: Callable[[Any], T],
) -> ListResponse[T]:
    """Deserialize a wire list page.

    Returns:
        A ListResponse with each item passed through ``deserializer``.

    """
    return ListResponse[Any](
        data=[deserializer(item) for item in data.get("data") or []],
        list_metadata=ListMetadata.model_validate(data.get("list_metadata") or {}),
    )
