"""
Pydantic schemas for live box-drawing gestures.
"""
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator


class GestureStart(BaseModel):
    """Pointer-down on a surface; coordinates are surface pixels."""
    x: float = Field(..., description="Pointer X in surface pixels")
    y: float = Field(..., description="Pointer Y in surface pixels")
    parent_width: float = Field(..., gt=0, description="Displayed surface width in pixels")
    parent_height: float = Field(..., gt=0, description="Displayed surface height in pixels")
    rotation: int = Field(0, description="Surface rotation in degrees (0/90/180/270)")

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v: int) -> int:
        if v not in (0, 90, 180, 270):
            raise ValueError(f"rotation must be 0, 90, 180, or 270, got {v}")
        return v


class GestureSample(BaseModel):
    """Pointer-move / pointer-up position in surface pixels."""
    x: float
    y: float


class GestureOut(BaseModel):
    gesture_id: str = Field(..., description="Opaque gesture identifier")
    render: Dict[str, Any] = Field(..., description="Render descriptor (viewBox, path, box)")


class GestureFinalizeOut(GestureOut):
    """
    Result of pointer-up.

    `cancellable` is evaluated on the drag as released, before any snapping
    to the default click box.
    """
    cancellable: bool
    empty: bool
