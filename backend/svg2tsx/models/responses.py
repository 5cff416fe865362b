"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from svg2tsx.models.options import ConversionOptions, OptimizerOptions


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class OptionsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    options: ConversionOptions
    optimization_options: OptimizerOptions
