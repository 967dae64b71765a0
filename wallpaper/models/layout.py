"""Геометрия одного варианта обоев."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Layout:
    """Рассчитанные размеры и смещения, в пикселях (float).

    `logo_y` отсчитывается от нижнего края холста; `logo_top` — та же позиция
    в системе координат Pillow (от верхнего края).
    """
    canvas_width: float
    canvas_height: float
    drawn_width: float
    source_x: float
    logo_width: float
    logo_height: float
    logo_margin_x: float
    logo_margin_y: float
    logo_x: float
    logo_y: float

    @property
    def logo_top(self) -> float:
        return self.canvas_height - self.logo_height - self.logo_y
