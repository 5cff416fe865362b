"""POST /api/convert, /api/parse, /api/optimize — thin wrappers over the core pipeline.

Option blocks left out of a request fall back to the options store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from svg2tsx.converter import ConversionResult, convert_svg
from svg2tsx.dependencies import get_options_store
from svg2tsx.models.options import ConversionOptions, OptimizerOptions, coerce_options
from svg2tsx.models.requests import ConvertRequest, OptimizeRequest, ParseRequest
from svg2tsx.models.svg_ast import SvgAst
from svg2tsx.options_store import OptionsStore
from svg2tsx.svg.optimizer import optimize_svg_ast
from svg2tsx.svg.parser import parse_svg

router = APIRouter()

_M = TypeVar("_M", bound=BaseModel)


def _resolve_options(model: type[_M], requested: Mapping[str, Any] | None, fallback: _M) -> _M:
    """Validate a request's option block, or use the store's value when it is absent."""
    if requested is None:
        return fallback
    try:
        return coerce_options(model, requested)
    except ValidationError as e:
        detail = e.errors(include_url=False, include_context=False)
        raise HTTPException(status_code=422, detail=detail) from e


@router.post("/convert", response_model=ConversionResult)
def convert(
    req: ConvertRequest,
    store: OptionsStore = Depends(get_options_store),
) -> ConversionResult:
    options = _resolve_options(ConversionOptions, req.options, store.options)
    optimizer_options = _resolve_options(
        OptimizerOptions, req.optimizer_options, store.optimization_options
    )
    return convert_svg(req.svg, options, optimizer_options)


@router.post("/parse", response_model=SvgAst)
def parse(req: ParseRequest) -> SvgAst:
    return parse_svg(req.svg)


@router.post("/optimize", response_model=SvgAst)
def optimize(
    req: OptimizeRequest,
    store: OptionsStore = Depends(get_options_store),
) -> SvgAst:
    optimizer_options = _resolve_options(
        OptimizerOptions, req.optimizer_options, store.optimization_options
    )
    return optimize_svg_ast(parse_svg(req.svg), optimizer_options)
