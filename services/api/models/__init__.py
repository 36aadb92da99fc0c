from __future__ import annotations

from .box import BoundingBox

__all__ = ["BoundingBox"]
