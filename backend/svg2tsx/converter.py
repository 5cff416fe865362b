"""Conversion pipeline — parse → optimize (optional) → generate → template."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from svg2tsx.errors import ConversionError
from svg2tsx.models.options import (
    DEFAULT_OPTIMIZER_OPTIONS,
    ConversionOptions,
    OptimizerOptions,
    coerce_options,
)
from svg2tsx.svg.optimizer import optimize_svg_ast
from svg2tsx.svg.parser import parse_svg
from svg2tsx.tsx.generator import generate_tsx

logger = logging.getLogger(__name__)


class ConversionResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str
    component_name: str
    optimized: bool = False
    elapsed_ms: float = 0.0


def convert_svg(
    svg_text: str,
    options: ConversionOptions | Mapping[str, Any] | None = None,
    optimizer_options: OptimizerOptions | Mapping[str, Any] | None = None,
) -> ConversionResult:
    """Convert SVG markup to a TSX component. SvgParseError propagates unchanged.

    Invalid options raise pydantic's ValidationError. Any other failure after parsing
    is raised as ConversionError.
    """
    start = time.perf_counter()
    opts = coerce_options(ConversionOptions, options)

    ast = parse_svg(svg_text)
    logger.debug("Parse finished in %.1fms", (time.perf_counter() - start) * 1000)

    try:
        if opts.optimize:
            if optimizer_options is None:
                optimizer_options = DEFAULT_OPTIMIZER_OPTIONS
            ast = optimize_svg_ast(ast, optimizer_options)

        code = generate_tsx(ast, opts)
    except ValidationError:
        raise
    except Exception as e:
        raise ConversionError(str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Converted %s: %d nodes in %.1fms (optimize=%s)",
        opts.component_name,
        sum(1 for _ in ast.root.walk()),
        elapsed,
        opts.optimize,
    )
    return ConversionResult(
        code=code,
        component_name=opts.component_name,
        optimized=opts.optimize,
        elapsed_ms=elapsed,
    )
