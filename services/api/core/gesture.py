"""
Live box drawing: turns one pointer drag into a normalized box.
"""
from __future__ import annotations

import math
from logging import getLogger
from typing import Any, Dict, Optional, Tuple

from core.outline import UNIT_SQUARE_PATH, clamp, format_view_box, normalize_point
from core.shape import Shape
from models.box import BoundingBox

logger = getLogger(__name__)

# A "click" (drag smaller than the threshold on both axes) is replaced by a
# default square of this side, in surface pixels.
DEFAULT_SNAP_SIDE_PX = 100.0
DEFAULT_CANCEL_THRESHOLD_PX = 2.0


class DrawGesture:
    """
    Mutable state of a single pointer-down -> move -> up interaction.

    The gesture owns one box plus the anchor (start corner) and the surface
    geometry captured at the most recent (re)start. After `to_shape()` the
    host is expected to drop the instance.
    """

    def __init__(
        self,
        x: float,
        y: float,
        parent_width: float,
        parent_height: float,
        rotation: int = 0,
        *,
        snap_side_px: float = DEFAULT_SNAP_SIDE_PX,
        cancel_threshold_px: float = DEFAULT_CANCEL_THRESHOLD_PX,
    ):
        self._snap_side_px = snap_side_px
        self._cancel_threshold_px = cancel_threshold_px
        self._box = BoundingBox()
        self._anchor_x = 0.0
        self._anchor_y = 0.0
        self._parent_width = parent_width
        self._parent_height = parent_height
        self._rotation = rotation
        self.restart(x, y, parent_width, parent_height, rotation)

    def restart(
        self,
        x: float,
        y: float,
        parent_width: float,
        parent_height: float,
        rotation: int = 0,
    ) -> None:
        """Re-anchor this gesture for a new box (multi-shape tools)."""
        self._parent_width = parent_width
        self._parent_height = parent_height
        self._rotation = rotation
        self._anchor_x, self._anchor_y = self._normalize(x, y)
        self._box.set(self._anchor_x, self._anchor_y, 0.0, 0.0)

    def _normalize(self, x: float, y: float) -> Tuple[float, float]:
        nx, ny = normalize_point(
            x, y, self._parent_width, self._parent_height, self._rotation
        )
        # Pointer may leave the surface; keep the box inside [0, 1].
        return clamp(nx, 0.0, 1.0), clamp(ny, 0.0, 1.0)

    # --------------------
    # Sampling
    # --------------------
    def add_sample(self, x: float, y: float) -> Dict[str, Any]:
        nx, ny = self._normalize(x, y)
        x1 = min(self._anchor_x, nx)
        y1 = min(self._anchor_y, ny)
        width = clamp(abs(nx - self._anchor_x), 0.0, 1.0)
        height = clamp(abs(ny - self._anchor_y), 0.0, 1.0)
        self._box.set(x1, y1, width, height)
        return self.default_properties

    def finalize(self, x: float, y: float) -> Dict[str, Any]:
        """
        Last sample of the drag. A click-sized box snaps to the default
        square, kept inside the surface.
        """
        descriptor = self.add_sample(x, y)
        if not self._below_threshold():
            return descriptor

        side_x = self._snap_side_px / self._parent_width
        side_y = self._snap_side_px / self._parent_height
        nx = max(0.0, min(self._anchor_x, 1 - side_x))
        ny = max(0.0, min(self._anchor_y, 1 - side_y))
        self._box.set(nx, ny, side_x, side_y)
        logger.debug(
            f"Click gesture snapped to default box at ({nx:.4f}, {ny:.4f}) "
            f"size ({side_x:.4f}, {side_y:.4f})"
        )
        return self.default_properties

    def _below_threshold(self) -> bool:
        w, h = self._box.pixel_extent(self._parent_width, self._parent_height)
        return self._within_threshold(w) and self._within_threshold(h)

    def _within_threshold(self, extent_px: float) -> bool:
        # Extent comes from width * parent_width; an exact threshold drag may
        # land a few ulps above it depending on the anchor.
        limit = self._cancel_threshold_px
        return extent_px <= limit or math.isclose(extent_px, limit, rel_tol=1e-9)

    # --------------------
    # State queries
    # --------------------
    def is_cancellable(self) -> bool:
        """True when the live (unsnapped) box is click-sized on both axes."""
        return self._below_threshold()

    def is_empty(self) -> bool:
        return self._box.is_empty()

    @property
    def box(self) -> BoundingBox:
        return self._box.copy()

    @property
    def anchor(self) -> Tuple[float, float]:
        return (self._anchor_x, self._anchor_y)

    @property
    def view_box(self) -> str:
        return format_view_box(self._box)

    @property
    def default_properties(self) -> Dict[str, Any]:
        return {
            "viewBox": self.view_box,
            "path": {"d": self.path_data()},
            "box": self._box.to_list(),
        }

    @staticmethod
    def path_data() -> str:
        return UNIT_SQUARE_PATH

    def to_shape(self, rotation: Optional[int] = None) -> Shape:
        """Committed shape built from a copy of the current box."""
        shape = Shape(self._box)
        if rotation is not None:
            shape.set_rotation(rotation)
        return shape
