"""
Pydantic schemas for committed box shapes.
Boxes are normalized (0..1) in the surface's unrotated frame.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class BoxIn(BaseModel):
    """Normalized box with bounds validation."""
    x: float = Field(..., ge=0.0, le=1.0, description="Normalized X (left)")
    y: float = Field(..., ge=0.0, le=1.0, description="Normalized Y (top)")
    width: float = Field(..., ge=0.0, le=1.0, description="Normalized width")
    height: float = Field(..., ge=0.0, le=1.0, description="Normalized height")

    @model_validator(mode="after")
    def validate_bounds(self) -> "BoxIn":
        """Ensure box stays within the surface."""
        if self.x + self.width > 1.0001:  # Small tolerance for floating point
            raise ValueError(
                f"Box extends beyond surface width: x({self.x}) + width({self.width}) > 1.0"
            )
        if self.y + self.height > 1.0001:
            raise ValueError(
                f"Box extends beyond surface height: y({self.y}) + height({self.height}) > 1.0"
            )
        return self

    def as_list(self) -> List[float]:
        return [self.x, self.y, self.width, self.height]


class TranslateIn(BaseModel):
    x: float = Field(..., ge=0.0, le=1.0, description="New normalized X")
    y: float = Field(..., ge=0.0, le=1.0, description="New normalized Y")


class RotationIn(BaseModel):
    rotation: int = Field(..., description="Rotation in degrees (0/90/180/270)")

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v: int) -> int:
        if v not in (0, 90, 180, 270):
            raise ValueError(f"rotation must be 0, 90, 180, or 270, got {v}")
        return v


class SerializeIn(BaseModel):
    """Surface placement in absolute page units."""
    page_x: float = Field(0.0, description="Surface origin X")
    page_y: float = Field(0.0, description="Surface origin Y")
    page_width: float = Field(..., gt=0, description="Surface width")
    page_height: float = Field(..., gt=0, description="Surface height")
    for_copy: bool = Field(False, description="Serialize for clipboard copy")


class ShapeOut(BaseModel):
    shape_id: str
    rotation: int
    box: List[float]
    render: Dict[str, Any]


class ShapeRenderOut(BaseModel):
    shape_id: str
    render: Dict[str, Any]


class SerializedShapeOut(BaseModel):
    """
    Absolute coordinates. Move-to markers in `outline`/`lines` are null
    (NaN in the drawing layer).
    """
    lines: List[List[Optional[float]]]
    points: List[List[float]]
    outline: List[Optional[float]]
    rect: List[float]
