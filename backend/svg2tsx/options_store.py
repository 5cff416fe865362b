"""OptionsStore — the service's current conversion + optimizer options."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from svg2tsx.models.options import (
    DEFAULT_CONVERSION_OPTIONS,
    DEFAULT_OPTIMIZER_OPTIONS,
    ConversionOptions,
    OptimizerOptions,
)

logger = logging.getLogger(__name__)

Listener = Callable[["OptionsStore"], None]


class OptionsStore:
    """Thread-safe holder of the current options, with change subscriptions.

    Partial updates ignore ``None`` values and unknown keys. Getters return copies.
    """

    def __init__(
        self,
        options: ConversionOptions | None = None,
        optimization_options: OptimizerOptions | None = None,
    ) -> None:
        self._defaults = (
            (options or DEFAULT_CONVERSION_OPTIONS).model_copy(),
            (optimization_options or DEFAULT_OPTIMIZER_OPTIONS).model_copy(),
        )
        self._options, self._optimization_options = (m.model_copy() for m in self._defaults)
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @property
    def options(self) -> ConversionOptions:
        with self._lock:
            return self._options.model_copy()

    @property
    def optimization_options(self) -> OptimizerOptions:
        with self._lock:
            return self._optimization_options.model_copy()

    def set_options(self, partial: Mapping[str, Any]) -> None:
        self.update(options=partial)

    def set_optimization_options(self, partial: Mapping[str, Any]) -> None:
        self.update(optimization_options=partial)

    def update(
        self,
        options: Mapping[str, Any] | None = None,
        optimization_options: Mapping[str, Any] | None = None,
    ) -> None:
        """Merge both partials, or neither: a ValidationError leaves the store unchanged."""
        with self._lock:
            merged_options = _merge(self._options, options or {})
            merged_optimization = _merge(self._optimization_options, optimization_options or {})
            self._options = merged_options
            self._optimization_options = merged_optimization
        self._notify()

    def reset(self) -> None:
        with self._lock:
            self._options, self._optimization_options = (m.model_copy() for m in self._defaults)
        logger.info("Options reset to defaults")
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(store)`` after every change. Returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(self)


def _merge(current: Any, partial: Mapping[str, Any]) -> Any:
    model = type(current)
    data = current.model_dump()
    for key, value in partial.items():
        if value is None:
            continue
        field_name = _field_name(model, key)
        if field_name is not None:
            data[field_name] = value
    return model.model_validate(data)


def _field_name(model: Any, key: str) -> str | None:
    """Resolve a snake_case name or camelCase alias to the model's field name."""
    for name, field in model.model_fields.items():
        if key == name or key == field.alias:
            return name
    return None
