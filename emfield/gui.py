"""Interactive pygame window for placing charges and viewing their field."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Sequence

import pygame

from emfield.charge import ChargeType
from emfield.scene import (
    Rect,
    Scene,
    TITLE,
    field_line_seeds,
    grid_lines,
    trace_field_line,
    vector_field_samples,
)

WINDOW_TITLE = "EM Field Visualizer"
WINDOW_FRACTION = 0.8
FRAME_DELAY_MS = 16
ARROW_SIZE = 20

BACKGROUND = (30, 30, 30)
START_BACKGROUND = (20, 20, 20)
GRID_COLOR = (80, 80, 80)
AXIS_COLOR = (200, 200, 200)
START_BUTTON_COLOR = (0, 120, 255)
GO_BACK_COLOR = (200, 50, 50)
RESET_COLOR = (50, 150, 200)
TEXT_COLOR = (255, 255, 255)

_LINE_COLORS = {
    ChargeType.POSITIVE: (255, 0, 0),
    ChargeType.NEGATIVE: (0, 0, 255),
}

_KEY_CHARGES = {
    pygame.K_p: ChargeType.POSITIVE,
    pygame.K_n: ChargeType.NEGATIVE,
}


def _initial_size() -> tuple[int, int]:
    sizes = pygame.display.get_desktop_sizes()
    width, height = sizes[0] if sizes else (1000, 750)
    return int(width * WINDOW_FRACTION), int(height * WINDOW_FRACTION)


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


class Visualizer:
    """Owns the drawing surface and turns pygame events into scene changes.

    Without a ``surface`` a resizable window is opened covering most of the
    desktop; with one, everything is drawn onto that surface instead.
    """

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        *,
        scene: Scene | None = None,
        font_path: str | None = None,
        arrow_path: str | None = None,
        arrow_image: pygame.Surface | None = None,
        mouse_pos: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        self._owns_display = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode(_initial_size(), pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
        elif not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        if scene is None:
            width, height = surface.get_size()
            scene = Scene(width=width, height=height)
        self.scene = scene
        self.running = True
        self._font_path = font_path
        self._fonts: dict[int, pygame.font.Font] = {}
        self._mouse_pos = mouse_pos or pygame.mouse.get_pos
        if arrow_image is None and arrow_path is not None:
            arrow_image = self._load_arrow(arrow_path)
        if arrow_image is not None:
            arrow_image = pygame.transform.scale(arrow_image, (ARROW_SIZE, ARROW_SIZE))
        self._arrow = arrow_image

    def _load_arrow(self, path: str) -> pygame.Surface | None:
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError):
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            try:
                font = pygame.font.Font(self._font_path, size)
            except (pygame.error, OSError):
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _text(self, message: str, size: int = 16) -> pygame.Surface:
        return self._font(size).render(message, True, TEXT_COLOR)

    def _pointer(self, event: Any) -> tuple[int, int]:
        pos = getattr(event, "pos", None)
        return tuple(pos) if pos is not None else tuple(self._mouse_pos())

    def handle_event(self, event: Any) -> None:
        """Apply one pygame event to the scene."""
        scene = self.scene
        if event.type == pygame.VIDEORESIZE:
            scene.resize(event.w, event.h)
            if self._owns_display:
                self.surface = pygame.display.get_surface()
        elif event.type == pygame.QUIT:
            self.running = False

        if event.type == pygame.KEYDOWN:
            x, y = self._pointer(event)
            if event.key == pygame.K_g:
                scene.toggle_grid()
            elif event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in _KEY_CHARGES:
                scene.add_charge(x, y, _KEY_CHARGES[event.key])
            elif event.key == pygame.K_d:
                scene.delete_charge_at(x, y)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            scene.press(*self._pointer(event))
        elif event.type == pygame.MOUSEBUTTONUP:
            scene.release()
        elif event.type == pygame.MOUSEMOTION:
            scene.drag_to(*self._pointer(event))

    def draw(self) -> None:
        """Draw the current screen onto the surface."""
        self.surface.fill(BACKGROUND)
        if self.scene.in_start_screen:
            self._draw_start_screen()
        else:
            self._draw_grid()
            self._draw_vector_field()
            self._draw_field()
            self._draw_ui()

    def _draw_start_screen(self) -> None:
        surface = self.surface
        scene = self.scene
        surface.fill(START_BACKGROUND)
        cx = scene.width // 2
        texts = [self._text(TITLE, 24)]
        texts.extend(self._text(line, 18) for line in scene.instructions)
        for index, text in enumerate(texts):
            surface.blit(text, (cx - text.get_width() // 2, scene.start_screen_line_y(index)))
        self._draw_button(scene.start_button, START_BUTTON_COLOR, "START", 20)

    def _draw_button(self, rect: Rect, color: tuple[int, int, int], label: str, size: int) -> None:
        pygame.draw.rect(self.surface, color, _to_pygame_rect(rect))
        text = self._text(label, size)
        tw, th = text.get_size()
        self.surface.blit(
            text, (rect.x + int((rect.w - tw) / 2), rect.y + int((rect.h - th) / 2))
        )

    def _draw_grid(self) -> None:
        scene = self.scene
        if not scene.show_grid:
            return
        surface = self.surface
        width, height = scene.width, scene.height
        verticals, horizontals = grid_lines(width, height)
        for x in verticals:
            pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, height))
        for y in horizontals:
            pygame.draw.line(surface, GRID_COLOR, (0, y), (width, y))
        cx, cy = width // 2, height // 2
        pygame.draw.line(surface, AXIS_COLOR, (cx, 0), (cx, height))
        pygame.draw.line(surface, AXIS_COLOR, (0, cy), (width, cy))

    def _draw_vector_field(self) -> None:
        if self._arrow is None:
            return
        scene = self.scene
        for point, angle in vector_field_samples(scene.width, scene.height, scene.charges):
            rotated = pygame.transform.rotate(self._arrow, -angle)
            rw, rh = rotated.get_size()
            self.surface.blit(rotated, (int(point.x) - rw // 2, int(point.y) - rh // 2))

    def _draw_field(self) -> None:
        charges = self.scene.charges
        font = self._font(16)
        for charge in charges:
            charge.render(self.surface, font)
            color = _LINE_COLORS.get(charge.kind)
            if color is None:
                continue
            for seed in field_line_seeds(charge):
                for forward in (True, False):
                    points = trace_field_line(seed, forward, charges)
                    if len(points) > 1:
                        pygame.draw.lines(
                            self.surface,
                            color,
                            False,
                            [(int(p.x), int(p.y)) for p in points],
                        )

    def _draw_ui(self) -> None:
        scene = self.scene
        lines = scene.status_lines()
        boxes = [(10, 10, 200, 20), (10, 35, 300, 20)]
        boxes.extend((10, 60 + 20 * i, 300, 20) for i in range(len(lines) - 2))
        for line, (x, y, w, h) in zip(lines, boxes):
            text = pygame.transform.scale(self._text(line), (w, h))
            self.surface.blit(text, (x, y))
        self._draw_button(scene.go_back_button, GO_BACK_COLOR, "Go Back", 16)
        self._draw_button(scene.reset_button, RESET_COLOR, "Reset", 16)

    def step(self) -> bool:
        """Process pending events and draw one frame; return whether to go on."""
        for event in pygame.event.get():
            self.handle_event(event)
            if not self.running:
                return False
        self.draw()
        if self._owns_display:
            pygame.display.flip()
        return self.running

    def run(self) -> None:
        """Run frames until the window is closed or Escape is pressed."""
        try:
            while self.step():
                pygame.time.delay(FRAME_DELAY_MS)
        finally:
            if self._owns_display:
                pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="emfield", description="Place point charges and view their electric field."
    )
    parser.add_argument("--font", help="TrueType font used for labels")
    parser.add_argument("--arrow", help="image drawn at each vector-field sample")
    args = parser.parse_args(argv)
    Visualizer(font_path=args.font, arrow_path=args.arrow).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())