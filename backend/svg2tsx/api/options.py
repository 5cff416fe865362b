"""GET/PATCH/DELETE /api/options — the service's current conversion options."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from svg2tsx.dependencies import get_options_store
from svg2tsx.models.requests import OptionsUpdateRequest
from svg2tsx.models.responses import OptionsResponse
from svg2tsx.options_store import OptionsStore

router = APIRouter(prefix="/options")


def _snapshot(store: OptionsStore) -> OptionsResponse:
    return OptionsResponse(
        options=store.options,
        optimization_options=store.optimization_options,
    )


@router.get("", response_model=OptionsResponse)
async def get_options(store: OptionsStore = Depends(get_options_store)) -> OptionsResponse:
    return _snapshot(store)


@router.patch("", response_model=OptionsResponse)
async def update_options(
    req: OptionsUpdateRequest,
    store: OptionsStore = Depends(get_options_store),
) -> OptionsResponse:
    try:
        store.update(options=req.options, optimization_options=req.optimization_options)
    except ValidationError as e:
        detail = e.errors(include_url=False, include_context=False)
        raise HTTPException(status_code=422, detail=detail) from e
    return _snapshot(store)


@router.delete("", response_model=OptionsResponse)
async def reset_options(store: OptionsStore = Depends(get_options_store)) -> OptionsResponse:
    store.reset()
    return _snapshot(store)
