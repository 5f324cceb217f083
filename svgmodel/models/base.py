"""Shared base for every value in the document tree."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict

_M = TypeVar("_M", bound="SvgModel")


class SvgModel(BaseModel):
    """Pydantic base with the clone contract used across the model.

    Every composite value is exclusively owned by its parent; setters store a
    clone of their argument so callers keep ownership of what they passed in.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def clone(self: _M) -> _M:
        return self.model_copy(deep=True)
