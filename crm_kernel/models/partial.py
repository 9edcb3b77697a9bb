"""Base for partial-update payloads."""

from typing import ClassVar, FrozenSet

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    Every field may be omitted, but fields listed in `required_fields` are
    not-null on the record and so reject an explicit None.
    """

    required_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self):
        nulled = sorted(
            name for name in self.model_fields_set & self.required_fields
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields may not be null: {', '.join(nulled)}")
        return self
