"""Tagged CSS value tree.

Every node carries a ``type`` discriminator so a value survives a JSON round
trip through the API unchanged. Models are frozen: edits always produce a new
value via ``model_copy``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class UnitValue(BaseModel):
    """A number with a unit. Unitless numbers use the unit ``"number"``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["unit"] = "unit"
    value: float
    unit: str = "number"


class KeywordValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["keyword"] = "keyword"
    value: str


class LayersValue(BaseModel):
    """Comma-separated list, used for function arguments."""

    model_config = ConfigDict(frozen=True)

    type: Literal["layers"] = "layers"
    value: tuple["StyleValue", ...] = ()


class TupleValue(BaseModel):
    """Space-separated ordered sequence (a transform list, a translate triple)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tuple"] = "tuple"
    value: tuple["StyleValue", ...] = ()
    hidden: bool = False


class FunctionValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["function"] = "function"
    name: str
    args: LayersValue = Field(default_factory=LayersValue)
    hidden: bool = False


StyleValue = Annotated[
    Union[UnitValue, KeywordValue, LayersValue, TupleValue, FunctionValue],
    Field(discriminator="type"),
]

LayersValue.model_rebuild()
TupleValue.model_rebuild()
FunctionValue.model_rebuild()


def function(name: str, *args: StyleValue) -> FunctionValue:
    """Shorthand for building a function value from its arguments."""
    return FunctionValue(name=name, args=LayersValue(value=args))
