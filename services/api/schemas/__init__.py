"""
Pydantic schemas for API request/response validation.
"""
from .gesture import GestureFinalizeOut, GestureOut, GestureSample, GestureStart
from .shape import (
    BoxIn,
    RotationIn,
    SerializedShapeOut,
    SerializeIn,
    ShapeOut,
    ShapeRenderOut,
    TranslateIn,
)

__all__ = [
    "GestureStart",
    "GestureSample",
    "GestureOut",
    "GestureFinalizeOut",
    "BoxIn",
    "TranslateIn",
    "RotationIn",
    "SerializeIn",
    "ShapeOut",
    "ShapeRenderOut",
    "SerializedShapeOut",
]
