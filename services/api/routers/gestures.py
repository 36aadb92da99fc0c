"""
Live box-drawing endpoints.

The editor streams pointer positions here; every call returns the render
descriptor to apply to the drawing layer.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from typing import Annotated
from logging import getLogger

from core.gesture import DrawGesture
from core.sessions import SessionStore, get_session_store
from schemas import GestureFinalizeOut, GestureOut, GestureSample, GestureStart, ShapeOut
from settings import get_settings

logger = getLogger(__name__)
router = APIRouter(prefix="/gestures", tags=["gestures"])

Store = Annotated[SessionStore, Depends(get_session_store)]


def _require_gesture(store: SessionStore, gesture_id: str) -> DrawGesture:
    gesture = store.get_gesture(gesture_id)
    if gesture is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="GESTURE_NOT_FOUND")
    return gesture


@router.post("", response_model=GestureOut, status_code=status.HTTP_201_CREATED)
async def start_gesture(body: GestureStart, store: Store):
    """Pointer-down: anchor a new zero-size box."""
    settings = get_settings()
    gesture = DrawGesture(
        body.x,
        body.y,
        body.parent_width,
        body.parent_height,
        body.rotation,
        snap_side_px=settings.click_snap_side_px,
        cancel_threshold_px=settings.cancel_threshold_px,
    )
    gesture_id = store.add_gesture(gesture)
    logger.info(f"Started gesture {gesture_id} (rotation={body.rotation})")
    return GestureOut(gesture_id=gesture_id, render=gesture.default_properties)


@router.post("/{gesture_id}/samples", response_model=GestureOut)
async def add_sample(gesture_id: str, body: GestureSample, store: Store):
    gesture = _require_gesture(store, gesture_id)
    return GestureOut(gesture_id=gesture_id, render=gesture.add_sample(body.x, body.y))


@router.post("/{gesture_id}/restart", response_model=GestureOut)
async def restart_gesture(gesture_id: str, body: GestureStart, store: Store):
    gesture = _require_gesture(store, gesture_id)
    gesture.restart(body.x, body.y, body.parent_width, body.parent_height, body.rotation)
    return GestureOut(gesture_id=gesture_id, render=gesture.default_properties)


@router.post("/{gesture_id}/finalize", response_model=GestureFinalizeOut)
async def finalize_gesture(gesture_id: str, body: GestureSample, store: Store):
    """
    Pointer-up. `cancellable` reflects the drag as released; the returned
    render descriptor is the (possibly snapped) final box.
    """
    gesture = _require_gesture(store, gesture_id)
    gesture.add_sample(body.x, body.y)
    cancellable = gesture.is_cancellable()
    render = gesture.finalize(body.x, body.y)
    return GestureFinalizeOut(
        gesture_id=gesture_id,
        render=render,
        cancellable=cancellable,
        empty=gesture.is_empty(),
    )


@router.post("/{gesture_id}/shape", response_model=ShapeOut, status_code=status.HTTP_201_CREATED)
async def commit_gesture(gesture_id: str, store: Store):
    """Convert the gesture into a stored shape; the gesture is discarded."""
    gesture = _require_gesture(store, gesture_id)
    shape = gesture.to_shape()
    store.drop_gesture(gesture_id)
    shape_id = store.add_shape(shape)
    logger.info(f"Gesture {gesture_id} committed as shape {shape_id}")
    return ShapeOut(
        shape_id=shape_id,
        rotation=shape.rotation,
        box=shape.box.to_list(),
        render=shape.render_properties(),
    )


@router.delete("/{gesture_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_gesture(gesture_id: str, store: Store):
    if not store.drop_gesture(gesture_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="GESTURE_NOT_FOUND")
    logger.info(f"Cancelled gesture {gesture_id}")
