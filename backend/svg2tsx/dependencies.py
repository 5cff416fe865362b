"""FastAPI dependency injection."""

from __future__ import annotations

from svg2tsx.config import settings
from svg2tsx.models.options import DEFAULT_CONVERSION_OPTIONS
from svg2tsx.options_store import OptionsStore

_options_store = OptionsStore(
    options=DEFAULT_CONVERSION_OPTIONS.model_copy(
        update={"component_name": settings.default_component_name}
    ),
)


def get_settings():
    return settings


def get_options_store() -> OptionsStore:
    return _options_store
