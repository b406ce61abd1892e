"""
Shared building blocks for the API schemas.

``CamelModel`` maps snake_case attributes to the camelCase names used
on the wire (``image_url`` ↔ ``imageUrl``).  Both spellings are
accepted on input; responses are always rendered with the camelCase
aliases.  Unknown input fields are ignored, which is what strips
client‑supplied ``id``, ``status`` or ``registrationDate`` values
from insertable payloads.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


# ---------- Reusable type aliases ----------
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Capacity = Annotated[int, Field(gt=0, le=10_000)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )
