"""Window-independent state and geometry of the field visualizer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from emfield.charge import Charge, ChargeType
from emfield.field import field_at, voltage_at
from emfield.vector import Vector2D

SCALE = 40
"""Pixels per grid unit."""

FIELD_LINES_PER_CHARGE = 12
SEED_RADIUS = 10.0
TRACE_STEPS = 500
TRACE_STEP_SIZE = 4.0
TRACE_MIN_FIELD = 1e-3
ARROW_MIN_FIELD = 0.1

TITLE = "Welcome to the EM Field Visualizer"
INSTRUCTIONS = (
    "Press G to toggle grid on/off",
    "Press P to create a POSITIVE charge",
    "Press N to create a NEGATIVE charge",
    "Hover over a charge and press D to DELETE it",
    "Press ESC to quit",
    "Click START to begin simulation",
)
LINE_SPACING = 40
START_SCREEN_TOP_OFFSET = 160

_LABELS = {
    ChargeType.POSITIVE: "Positive",
    ChargeType.NEGATIVE: "Negative",
    ChargeType.NEUTRAL: "Neutral",
}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen pixels."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies in the rectangle, edges included."""
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h


def screen_to_grid(pos: Vector2D, width: int, height: int) -> Vector2D:
    """Convert screen pixels to grid units centred on the window."""
    return Vector2D((pos.x - width // 2) / SCALE, (pos.y - height // 2) / SCALE)


def grid_to_screen(pos: Vector2D, width: int, height: int) -> Vector2D:
    """Convert grid units to screen pixels; grid y grows upwards."""
    return Vector2D(width // 2 + pos.x * SCALE, height // 2 - pos.y * SCALE)


def trace_field_line(
    start: Vector2D, forward: bool, charges: list[Charge]
) -> list[Vector2D]:
    """Follow the field from ``start`` and return the visited points.

    Consecutive points form the drawn segments. Tracing stops after a fixed
    number of steps or where the field becomes negligible.
    """
    points = [start]
    pos = start
    for _ in range(TRACE_STEPS):
        e = field_at(pos, charges)
        if e.magnitude() < TRACE_MIN_FIELD:
            break
        direction = e.normalized()
        if not forward:
            direction = -direction
        pos = pos + direction * TRACE_STEP_SIZE
        points.append(pos)
    return points


def field_line_seeds(charge: Charge) -> list[Vector2D]:
    """Starting points of the field lines drawn around a charge."""
    if charge.kind not in (ChargeType.POSITIVE, ChargeType.NEGATIVE):
        return []
    step = 2 * math.pi / FIELD_LINES_PER_CHARGE
    return [
        charge.pos + Vector2D(math.cos(i * step), math.sin(i * step)) * SEED_RADIUS
        for i in range(FIELD_LINES_PER_CHARGE)
    ]


def vector_field_samples(
    width: int, height: int, charges: list[Charge]
) -> Iterator[tuple[Vector2D, float]]:
    """Yield grid points with a noticeable field and the field's angle there."""
    cx, cy = width // 2, height // 2
    units_x = width // SCALE // 2
    units_y = height // SCALE // 2
    for j in range(-units_y, units_y + 1):
        for i in range(-units_x, units_x + 1):
            point = Vector2D(cx + i * SCALE, cy - j * SCALE)
            e = field_at(point, charges)
            if e.magnitude() > ARROW_MIN_FIELD:
                yield point, e.angle()


def grid_lines(width: int, height: int) -> tuple[list[int], list[int]]:
    """X positions of vertical lines and y positions of horizontal lines."""
    cx, cy = width // 2, height // 2
    half_x = width // SCALE // 2
    half_y = height // SCALE // 2
    verticals = [cx + i * SCALE for i in range(-half_x, half_x + 1)]
    horizontals = [cy - j * SCALE for j in range(-half_y, half_y + 1)]
    return verticals, horizontals


@dataclass
class Scene:
    """Charges, buttons and screen state, independent of any drawing library."""

    width: int = 800
    height: int = 600
    instructions: tuple[str, ...] = INSTRUCTIONS
    charges: list[Charge] = field(default_factory=list)
    show_grid: bool = False
    in_start_screen: bool = True
    start_button: Rect = field(init=False)
    go_back_button: Rect = field(init=False)
    reset_button: Rect = field(init=False)

    def __post_init__(self) -> None:
        self.layout_buttons()

    def resize(self, width: int, height: int) -> None:
        """Adopt a new window size and move the buttons with it."""
        self.width = width
        self.height = height
        self.layout_buttons()

    def toggle_grid(self) -> None:
        self.show_grid = not self.show_grid

    def add_charge(self, x: float, y: float, kind: ChargeType) -> Charge:
        """Place a new unit charge at a screen position."""
        charge = Charge(Vector2D(x, y), kind)
        self.charges.append(charge)
        return charge

    def delete_charge_at(self, x: float, y: float) -> Charge | None:
        """Remove the first charge under the point and return it, if any."""
        for index, charge in enumerate(self.charges):
            if charge.is_inside(x, y):
                return self.charges.pop(index)
        return None

    def press(self, x: float, y: float) -> None:
        """Handle a mouse button press at a screen position."""
        if self.in_start_screen:
            if self.start_button.contains(x, y):
                self.in_start_screen = False
        else:
            for charge in self.charges:
                if charge.is_inside(x, y):
                    charge.is_dragging = True

        if self.in_start_screen:
            return
        if self.go_back_button.contains(x, y):
            self.in_start_screen = True
            self.charges.clear()
            return
        if self.reset_button.contains(x, y):
            self.charges.clear()

    def release(self) -> None:
        """Handle a mouse button release: nothing is dragged any more."""
        for charge in self.charges:
            charge.is_dragging = False

    def drag_to(self, x: float, y: float) -> None:
        """Move every dragged charge to the pointer."""
        for charge in self.charges:
            if charge.is_dragging:
                charge.pos = Vector2D(x, y)

    def layout_buttons(self) -> None:
        """Place the start, go-back and reset buttons for the current size."""
        cx = self.width // 2
        lines = 1 + len(self.instructions)
        start_y = (
            self.height // 2
            - START_SCREEN_TOP_OFFSET
            + lines * LINE_SPACING
            + 20
        )
        self.start_button = Rect(cx - 100, start_y, 200, 50)
        button_y = self.height - 40
        self.go_back_button = Rect(20, button_y, 120, 30)
        self.reset_button = Rect(self.width - 140, button_y, 120, 30)

    def start_screen_line_y(self, index: int) -> int:
        """Top of the given line on the start screen; the title is line 0."""
        return self.height // 2 - START_SCREEN_TOP_OFFSET + index * LINE_SPACING

    def status_lines(self) -> list[str]:
        """Readouts at the window centre followed by one line per charge."""
        cx, cy = self.width // 2, self.height // 2
        centre = Vector2D(cx, cy)
        volts = voltage_at(centre, self.charges)
        e = field_at(centre, self.charges)
        lines = [
            f"Voltage: {int(volts)} V",
            f"Field: ({int(e.x)}, {int(e.y)}) N/C",
        ]
        for charge in self.charges:
            gx = int(charge.pos.x) - cx
            gy = int(cy - charge.pos.y)
            lines.append(f"{_LABELS[charge.kind]} ({gx}, {gy})")
        return lines