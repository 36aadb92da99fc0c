"""
Committed box shape endpoints: rotation, resize, move and serialization.
"""
from __future__ import annotations

import math
from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import Annotated, List, Optional, Sequence
from logging import getLogger

from core.sessions import SessionStore, get_session_store
from core.shape import Shape
from schemas import (
    BoxIn,
    RotationIn,
    SerializedShapeOut,
    SerializeIn,
    ShapeOut,
    ShapeRenderOut,
    TranslateIn,
)

logger = getLogger(__name__)
router = APIRouter(prefix="/shapes", tags=["shapes"])

Store = Annotated[SessionStore, Depends(get_session_store)]


def _require_shape(store: SessionStore, shape_id: str) -> Shape:
    shape = store.get_shape(shape_id)
    if shape is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="SHAPE_NOT_FOUND")
    return shape


def _nan_to_none(values: Sequence[float]) -> List[Optional[float]]:
    # JSON has no NaN; move-to markers go out as null.
    return [None if math.isnan(v) else v for v in values]


@router.get("/{shape_id}", response_model=ShapeOut)
async def get_shape(shape_id: str, store: Store):
    shape = _require_shape(store, shape_id)
    return ShapeOut(
        shape_id=shape_id,
        rotation=shape.rotation,
        box=shape.box.to_list(),
        render=shape.render_properties(),
    )


@router.put("/{shape_id}/rotation", response_model=ShapeRenderOut)
async def set_rotation(shape_id: str, body: RotationIn, store: Store):
    shape = _require_shape(store, shape_id)
    return ShapeRenderOut(shape_id=shape_id, render=shape.set_rotation(body.rotation))


@router.post("/{shape_id}/resize/preview", response_model=ShapeRenderOut)
async def preview_resize(shape_id: str, body: BoxIn, store: Store):
    """Transform for live resize feedback; the stored box is unchanged."""
    shape = _require_shape(store, shape_id)
    return ShapeRenderOut(shape_id=shape_id, render=shape.preview_resize(body.as_list()))


@router.post("/{shape_id}/resize", response_model=ShapeRenderOut)
async def commit_resize(shape_id: str, body: BoxIn, store: Store):
    shape = _require_shape(store, shape_id)
    render = shape.commit_resize(body.as_list())
    logger.info(f"Resized shape {shape_id} to {body.as_list()}")
    return ShapeRenderOut(shape_id=shape_id, render=render)


@router.post("/{shape_id}/translate", response_model=ShapeRenderOut)
async def commit_translate(shape_id: str, body: TranslateIn, store: Store):
    shape = _require_shape(store, shape_id)
    box = shape.box
    if body.x + box.width > 1.0001 or body.y + box.height > 1.0001:  # Same tolerance as BoxIn
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Translated box extends beyond surface: "
                f"({body.x} + {box.width}, {body.y} + {box.height}) > 1.0"
            ),
        )
    return ShapeRenderOut(shape_id=shape_id, render=shape.commit_translate(body.x, body.y))


@router.post("/{shape_id}/serialize", response_model=SerializedShapeOut)
async def serialize_shape(shape_id: str, body: SerializeIn, store: Store):
    """Absolute coordinates; an empty shape has nothing to persist (204)."""
    shape = _require_shape(store, shape_id)
    if shape.is_empty():
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    data = shape.serialize(
        [body.page_x, body.page_y, body.page_width, body.page_height],
        for_copy=body.for_copy,
    )
    outline = _nan_to_none(data["outline"])
    return SerializedShapeOut(
        lines=[outline],
        points=[list(p) for p in data["points"]],
        outline=outline,
        rect=data["rect"],
    )


@router.delete("/{shape_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shape(shape_id: str, store: Store):
    if not store.drop_shape(shape_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="SHAPE_NOT_FOUND")
    logger.info(f"Deleted shape {shape_id}")
