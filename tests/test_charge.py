import pygame
import pytest

from emfield.charge import Charge, ChargeType
from emfield.vector import Vector2D

BACKGROUND = (30, 30, 30, 255)


@pytest.fixture
def surface():
    surf = pygame.Surface((100, 100))
    surf.fill(BACKGROUND)
    return surf


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 16)


def test_defaults():
    c = Charge(Vector2D(5, 5), ChargeType.POSITIVE)
    assert c.magnitude == 1.0
    assert c.is_dragging is False


def test_is_inside_center_and_edges():
    c = Charge(Vector2D(50, 60), ChargeType.NEGATIVE)
    assert c.is_inside(50, 60)
    assert c.is_inside(60, 70)
    assert c.is_inside(40, 50)


@pytest.mark.parametrize("point", [(61, 60), (39, 60), (50, 71), (50, 49)])
def test_is_inside_rejects_points_outside_box(point):
    c = Charge(Vector2D(50, 60), ChargeType.POSITIVE)
    assert not c.is_inside(*point)


@pytest.mark.parametrize(
    "kind, color",
    [
        (ChargeType.POSITIVE, (255, 0, 0, 255)),
        (ChargeType.NEGATIVE, (0, 0, 255, 255)),
        (ChargeType.NEUTRAL, (128, 128, 128, 255)),
    ],
)
def test_render_fills_disc_with_type_color(surface, kind, color):
    Charge(Vector2D(50, 50), kind).render(surface, None)
    assert tuple(surface.get_at((50, 50))) == color
    assert tuple(surface.get_at((45, 53))) == color


def test_render_leaves_corners_of_box_untouched(surface):
    Charge(Vector2D(50, 50), ChargeType.POSITIVE).render(surface, None)
    assert tuple(surface.get_at((41, 41))) == BACKGROUND
    assert tuple(surface.get_at((58, 58))) == BACKGROUND
    assert tuple(surface.get_at((70, 50))) == BACKGROUND


def test_render_near_border_does_not_raise_and_draws_visible_part(surface):
    Charge(Vector2D(2, 2), ChargeType.NEGATIVE).render(surface, None)
    assert tuple(surface.get_at((2, 2))) == (0, 0, 255, 255)


def test_render_positive_sign_with_font(surface, font):
    Charge(Vector2D(50, 50), ChargeType.POSITIVE).render(surface, font)
    pixels = [surface.get_at((x, y)) for x in range(40, 61) for y in range(40, 61)]
    assert any(p.g > 100 for p in pixels)


def test_render_neutral_draws_no_sign(surface, font):
    Charge(Vector2D(50, 50), ChargeType.NEUTRAL).render(surface, font)
    gray = (128, 128, 128, 255)
    disc = [
        tuple(surface.get_at((x, y)))
        for x in range(45, 56)
        for y in range(45, 56)
    ]
    assert all(p == gray for p in disc)