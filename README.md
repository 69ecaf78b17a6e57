# emfield

An interactive visualizer for the electric field and electric potential of point
charges. You place positive and negative charges on a canvas and drag them
around. Field lines and live readouts update as you go. You can also turn on an
optional grid of direction arrows.

## Installation

```
pip install .
```

The window is drawn with `pygame`, which is installed along with the package.

## Running

```
emfield [--font FONT.ttf] [--arrow ARROW.png]
```

- `--font`: a TrueType font for all labels. If it is missing or cannot be
  loaded, pygame's default font is used.
- `--arrow`: an image drawn, scaled to 20×20 pixels and rotated, at every
  vector-field sample point. This works where the field is stronger than 0.1. The
  package ships no arrow image. Without this option, or if the image cannot be
  loaded, no vector-field arrows are drawn. The field lines are still drawn.

The window opens at 80% of the desktop size and can be resized. A start screen
lists the controls. Click **START** to begin.

## Controls

| Input                    | Action                                  |
|--------------------------|-----------------------------------------|
| `P`                      | Place a positive charge at the mouse    |
| `N`                      | Place a negative charge at the mouse    |
| `D` (hovering a charge)  | Delete the first charge under the mouse |
| `G`                      | Toggle the coordinate grid              |
| Click and drag a charge  | Move it                                 |
| **Go Back** button       | Return to the start screen, clear all   |
| **Reset** button         | Remove every charge                     |
| `Esc` or closing window  | Quit                                    |

The upper-left corner shows readouts measured at the centre of the window:

- the potential (V);
- the field (N/C).

Below them, each charge's position is listed in pixels relative to the centre,
with y pointing up.

Each charge draws 12 field lines, which start 10 pixels from it. Each line is
traced in both directions for up to 500 steps of 4 pixels.

## Using the physics from Python

The field and potential calculations work without a window:

```python
from emfield.vector import Vector2D
from emfield.charge import Charge, ChargeType
from emfield.field import field_at, voltage_at

charges = [
    Charge(Vector2D(100, 100), ChargeType.POSITIVE),
    Charge(Vector2D(200, 100), ChargeType.NEGATIVE),
]

e = field_at(Vector2D(150, 100), charges)
print(e.magnitude(), e.angle())
print(voltage_at(Vector2D(150, 150), charges))
```

Positions are in screen units. The Coulomb constant is scaled to those units
(`emfield.field.K`).

Charges closer than one unit to the sample point are skipped. A point sitting on
a charge therefore does not blow up.

Every charge that is not `ChargeType.POSITIVE` counts as negative in both sums.
This includes `ChargeType.NEUTRAL`.

### Modules

- `emfield.vector.Vector2D`: an immutable 2D vector. It has `+`, `-`, scalar
  `*` and unary `-`, plus the methods `magnitude()`, `normalized()` and
  `angle()`. `angle()` returns degrees.
- `emfield.charge`: `ChargeType` and `Charge`.
  - `Charge.is_inside(x, y)` tests a point against the charge's 20×20 hit box.
  - `Charge.render(surface, font)` draws the charge.
- `emfield.field`: `field_at` and `voltage_at`.
- `emfield.scene`: the window-independent state and geometry. Drawing is not
  needed to use it.
  - `Scene` holds the charges, the grid flag, the current screen and the
    button rectangles (`Rect`).
  - Its methods are `resize`, `toggle_grid`, `add_charge`,
    `delete_charge_at`, `press`, `release`, `drag_to`, `layout_buttons`,
    `start_screen_line_y` and `status_lines`.
  - The coordinate helpers are `screen_to_grid` and `grid_to_screen`. There are
    40 pixels per grid unit.
  - The drawing geometry comes from `trace_field_line`, `field_line_seeds`,
    `vector_field_samples` and `grid_lines`.
- `emfield.gui`: `Visualizer`, the pygame front end, and `main`, the `emfield`
  command.
  - Given its own `surface`, `Visualizer` draws onto that surface and opens no
    window.
  - `handle_event`, `draw` and `step` can be driven one call at a time.
  - `run` loops until quit.

## Tests

```
pip install .[test]
pytest
```