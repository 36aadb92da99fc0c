"""
Committed box shape: render properties, resize/translate/rotate and
serialization to absolute surface coordinates.
"""
from __future__ import annotations

import math
from logging import getLogger
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from core.outline import (
    UNIT_SQUARE_PATH,
    format_number,
    format_view_box,
    rescale,
    rescale_and_swap,
    safe_ratio,
    svg_round,
)
from models.box import BoundingBox

logger = getLogger(__name__)

BoxLike = Union[BoundingBox, Sequence[float]]
RescaleFn = Callable[..., List[float]]


def _as_box(value: BoxLike) -> BoundingBox:
    if isinstance(value, BoundingBox):
        return value.copy()
    return BoundingBox.from_sequence(value)


def _origin(x: float, y: float) -> str:
    return f"{svg_round(x)} {svg_round(y)}"


def _join_transforms(*parts: str) -> str:
    return " ".join(p for p in parts if p)


class Shape:
    """
    A committed box plus its current rotation (0/90/180/270).

    The path is always the unit square; resizing, moving and rotating only
    change the viewBox and the placement transform. The shape keeps its own
    copy of the box it was built from.
    """

    def __init__(self, box: BoxLike, rotation: int = 0):
        self._box = _as_box(box)
        self._rotation = rotation

    @property
    def box(self) -> BoundingBox:
        return self._box.copy()

    @property
    def rotation(self) -> int:
        return self._rotation

    @property
    def view_box(self) -> str:
        return format_view_box(self._box)

    @staticmethod
    def path_data() -> str:
        return UNIT_SQUARE_PATH

    def is_empty(self) -> bool:
        return self._box.is_empty()

    # --------------------
    # Render properties
    # --------------------
    @property
    def default_properties(self) -> Dict[str, Any]:
        return {
            "viewBox": self.view_box,
            "path": {"transform-origin": _origin(self._box.x, self._box.y)},
        }

    def render_properties(self) -> Dict[str, Any]:
        """Full snapshot pushed on creation or after a rotation change."""
        return {
            "viewBox": self.view_box,
            "path": {
                "d": self.path_data(),
                "transform-origin": _origin(self._box.x, self._box.y),
                "transform": self.rotation_transform() or None,
            },
            "box": self._box.to_list(),
        }

    def set_rotation(self, rotation: int) -> Dict[str, Any]:
        self._rotation = rotation
        logger.debug(f"Shape rotation set to {rotation}")
        return {"path": {"transform": self.rotation_transform()}}

    def rotation_transform(self) -> str:
        """
        Matrix placing the unit square for the current rotation, expressed in
        the box's own units. Empty string means no transform (0 and any
        non-cardinal rotation).
        """
        width, height = self._box.width, self._box.height
        if self._rotation == 90:
            a, b, c, d, e, f = 0, safe_ratio(height, width), -safe_ratio(width, height), 0, width, 0
        elif self._rotation == 180:
            a, b, c, d, e, f = -1, 0, 0, -1, width, height
        elif self._rotation == 270:
            a, b, c, d, e, f = 0, -safe_ratio(height, width), safe_ratio(width, height), 0, 0, height
        else:
            return ""
        return (
            f"matrix({format_number(a)} {format_number(b)} {format_number(c)} "
            f"{format_number(d)} {svg_round(e)} {svg_round(f)})"
        )

    # --------------------
    # Resize / translate
    # --------------------
    def preview_resize(self, new_box: BoxLike) -> Dict[str, Any]:
        """Live resize feedback. Stored state is left untouched."""
        new_x, new_y, new_width, new_height = _as_box(new_box)
        x, y, width, height = self._box
        sx = safe_ratio(new_width, width)
        sy = safe_ratio(new_height, height)
        transform = _join_transforms(
            self.rotation_transform(),
            f"scale({format_number(sx)} {format_number(sy)})",
            f"translate({svg_round(new_x - x)} {svg_round(new_y - y)})",
        )
        return {
            "path": {
                "transform-origin": _origin(x, y),
                "transform": transform,
            },
        }

    def commit_resize(self, new_box: BoxLike) -> Dict[str, Any]:
        new_x, new_y, new_width, new_height = _as_box(new_box)
        self._box.set(new_x, new_y, new_width, new_height)
        return {
            "viewBox": self.view_box,
            "path": {
                "transform-origin": _origin(new_x, new_y),
                "transform": self.rotation_transform() or None,
                "d": self.path_data(),
            },
        }

    def commit_translate(self, new_x: float, new_y: float) -> Dict[str, Any]:
        tx = new_x - self._box.x
        ty = new_y - self._box.y
        self._box.x = new_x
        self._box.y = new_y
        return {
            "viewBox": self.view_box,
            "path": {
                "d": self.path_data(),
                "transform-origin": _origin(new_x, new_y),
                "transform": _join_transforms(
                    self.rotation_transform(),
                    f"translate({svg_round(tx)} {svg_round(ty)})",
                ),
            },
        }

    def update_parent_dimensions(self, dims: Sequence[float], scale: float) -> BoundingBox:
        # Normalized box does not depend on the displayed size.
        return self._box.copy()

    def update_property(self, name: str, value: Any) -> Optional[Dict[str, Any]]:
        return None

    # --------------------
    # Serialization
    # --------------------
    def serialize(self, surface_box: Sequence[float], for_copy: bool = False) -> Dict[str, Any]:
        """
        Absolute coordinates of the box on the surface.

        `surface_box` is [page_x, page_y, page_width, page_height]. Returns
        `points` (corners clockwise from top-left), `outline` (each corner
        preceded by a NaN move-to marker), `lines` ([outline]) and `rect`
        ([x1, y1, x2, y2]).
        """
        page_x, page_y, page_width, page_height = surface_box
        x, y, width, height = self._box
        rescale_fn: RescaleFn

        if self._rotation == 90:
            rescale_fn = rescale_and_swap
            tx, ty, sx, sy = page_x, page_y, page_width, page_height
            x1 = page_x + y * page_width
            y1 = page_y + x * page_height
            x2 = page_x + (y + height) * page_width
            y2 = page_y + (x + width) * page_height
        elif self._rotation == 180:
            rescale_fn = rescale
            tx, ty, sx, sy = page_x + page_width, page_y, -page_width, page_height
            x1 = page_x + (1 - x - width) * page_width
            y1 = page_y + y * page_height
            x2 = page_x + (1 - x) * page_width
            y2 = page_y + (y + height) * page_height
        elif self._rotation == 270:
            rescale_fn = rescale_and_swap
            tx, ty = page_x + page_width, page_y + page_height
            sx, sy = -page_width, -page_height
            x1 = page_x + (1 - y - height) * page_width
            y1 = page_y + (1 - x - width) * page_height
            x2 = page_x + (1 - y) * page_width
            y2 = page_y + (1 - x) * page_height
        else:
            if self._rotation != 0:
                logger.debug(f"Serializing rotation {self._rotation} with 0 degree formulas")
            rescale_fn = rescale
            tx, ty, sx, sy = page_x, page_y + page_height, page_width, -page_height
            x1 = page_x + x * page_width
            y1 = page_y + (1 - y - height) * page_height
            x2 = page_x + (x + width) * page_width
            y2 = page_y + (1 - y) * page_height

        corners = [
            x, y,
            x + width, y,
            x + width, y + height,
            x, y + height,
        ]
        points = [rescale_fn(corners, tx, ty, sx, sy, [0.0] * 8 if for_copy else None)]

        nan = math.nan
        marked: List[float] = []
        for i in range(0, 8, 2):
            marked.extend((nan, nan, nan, nan, corners[i], corners[i + 1]))
        outline = rescale_fn(marked, tx, ty, sx, sy, [0.0] * 24 if for_copy else None)

        return {
            "lines": [outline],
            "points": points,
            "outline": outline,
            "rect": [x1, y1, x2, y2],
        }
