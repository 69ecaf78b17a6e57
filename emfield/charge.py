"""Point charges placed on the canvas."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from emfield.vector import Vector2D

HALF_SIZE = 10
"""Half the side of the square that counts as hitting a charge, in pixels."""

_RADIUS = 10
_TEXT_COLOR = (255, 255, 255)


class ChargeType(enum.Enum):
    """Sign of a charge."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


_FILL = {
    ChargeType.POSITIVE: (255, 0, 0, 255),
    ChargeType.NEGATIVE: (0, 0, 255, 255),
    ChargeType.NEUTRAL: (128, 128, 128, 255),
}

_SIGN = {
    ChargeType.POSITIVE: "+",
    ChargeType.NEGATIVE: "-",
    ChargeType.NEUTRAL: "",
}


@dataclass
class Charge:
    """A point charge at a screen position."""

    pos: Vector2D
    kind: ChargeType
    magnitude: float = 1.0
    is_dragging: bool = False

    def is_inside(self, mx: float, my: float) -> bool:
        """Whether a point lies within the charge's square hit box."""
        return (
            self.pos.x - HALF_SIZE <= mx <= self.pos.x + HALF_SIZE
            and self.pos.y - HALF_SIZE <= my <= self.pos.y + HALF_SIZE
        )

    def render(self, surface: Any, font: Any = None) -> None:
        """Draw the charge as a filled disc with its sign on top.

        ``surface`` needs ``set_at`` and ``blit``; ``font`` needs ``render``
        and may be None, in which case no sign is drawn.
        """
        fill = _FILL[self.kind]
        diameter = 2 * _RADIUS
        for w in range(diameter):
            for h in range(diameter):
                dx = _RADIUS - w
                dy = _RADIUS - h
                if dx * dx + dy * dy <= _RADIUS * _RADIUS:
                    surface.set_at(
                        (int(self.pos.x - _RADIUS + w), int(self.pos.y - _RADIUS + h)),
                        fill,
                    )

        sign = _SIGN[self.kind]
        if sign and font is not None:
            text = font.render(sign, True, _TEXT_COLOR)
            tw, th = text.get_size()
            surface.blit(text, (int(self.pos.x) - tw // 2, int(self.pos.y) - th // 2))