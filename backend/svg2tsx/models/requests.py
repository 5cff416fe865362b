"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParseRequest(_Request):
    svg: str = Field(..., description="Raw SVG code")


class OptimizeRequest(_Request):
    svg: str = Field(..., description="Raw SVG code")
    optimizer_options: dict[str, Any] | None = Field(
        default=None,
        description="Optimizer flags (e.g. removeIds=true); store values when omitted",
    )


class ConvertRequest(_Request):
    svg: str = Field(..., description="Raw SVG code")
    options: dict[str, Any] | None = Field(
        default=None,
        description="Conversion options (componentName, typescript, ...); store values when omitted",
    )
    optimizer_options: dict[str, Any] | None = Field(
        default=None,
        description="Optimizer flags; store values when omitted",
    )


class OptionsUpdateRequest(_Request):
    options: dict[str, Any] = Field(default_factory=dict)
    optimization_options: dict[str, Any] = Field(default_factory=dict)
