"""Conversion and optimizer option models, with the application defaults."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_M = TypeVar("_M", bound=BaseModel)


class _OptionsModel(BaseModel):
    # Unknown keys are dropped so stale persisted settings never break a conversion.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class OptimizerOptions(_OptionsModel):
    remove_data_attrs: bool = False
    remove_ids: bool = False
    remove_empty_groups: bool = False
    # Accepted for compatibility; the XML parser already collapses repeated attributes.
    merge_duplicate_attrs: bool = False
    remove_default_attrs: bool = False
    optimize_transforms: bool = False


class GeneratorOptions(_OptionsModel):
    component_name: str = "Icon"
    typescript: bool = True
    spread_props: bool = True
    use_memo: bool = False
    use_forward_ref: bool = False


class ConversionOptions(GeneratorOptions):
    optimize: bool = True


class TemplateOptions(GeneratorOptions):
    svg_content: str


DEFAULT_CONVERSION_OPTIONS = ConversionOptions()

DEFAULT_OPTIMIZER_OPTIONS = OptimizerOptions(
    remove_data_attrs=True,
    remove_ids=False,
    remove_empty_groups=True,
    merge_duplicate_attrs=True,
    remove_default_attrs=True,
    optimize_transforms=True,
)


def coerce_options(model: type[_M], options: _M | Mapping[str, Any] | None) -> _M:
    """Accept a model instance, a (camelCase or snake_case) mapping, or None.

    ``None`` values inside a mapping are treated as unset.
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, BaseModel):
        options = options.model_dump()
    return model.model_validate({k: v for k, v in options.items() if v is not None})
