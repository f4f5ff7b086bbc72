"""Shared pydantic configuration for Capital.com payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every request and response payload.

    Attributes are snake_case in Python and camelCase on the wire. Unknown
    response fields are ignored so new API fields do not break decoding.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Wire representation: camelCase keys, unset optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class StatusResponse(ApiModel):
    status: str = ""


class DealReferenceResponse(ApiModel):
    deal_reference: str = ""


__all__ = ["ApiModel", "DealReferenceResponse", "StatusResponse"]
