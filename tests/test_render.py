from __future__ import annotations

from stc_engine import Color
from stc_layout import NUMBER_HEIGHT, NUMBER_WIDTH, TILE_SIZE
from stc_render import AtlasRenderer


def make_renderer(screen, atlases) -> AtlasRenderer:
    return AtlasRenderer(screen, atlases["tiles"], atlases["background"], atlases["numbers"])


def test_draw_tile_uses_tile_column_and_normal_row(screen, atlases) -> None:
    make_renderer(screen, atlases).draw_tile(30, 40, 3, False)

    assert len(screen.blits) == 1
    source, dest, area = screen.blits[0]
    assert source is atlases["tiles"]
    assert dest == (30, 40)
    assert area == (TILE_SIZE * 3, 0, TILE_SIZE + 1, TILE_SIZE + 1)


def test_draw_tile_shadow_reads_second_atlas_row(screen, atlases) -> None:
    make_renderer(screen, atlases).draw_tile(0, 0, 5, True)

    _, _, area = screen.blits[0]
    assert area == (TILE_SIZE * 5, TILE_SIZE + 1, TILE_SIZE + 1, TILE_SIZE + 1)


def test_draw_background_covers_screen_origin(screen, atlases) -> None:
    make_renderer(screen, atlases).draw_background()

    assert screen.blits == [(atlases["background"], (0, 0), None)]


def test_draw_number_pads_with_zeros_right_to_left(screen, atlases) -> None:
    make_renderer(screen, atlases).draw_number(100, 20, 7, 3, Color.WHITE)

    assert len(screen.blits) == 3
    digits = [area.x // NUMBER_WIDTH for _, _, area in screen.blits]
    xs = [dest[0] for _, dest, _ in screen.blits]
    assert digits == [7, 0, 0]
    assert xs == [100 + 3 * NUMBER_WIDTH, 100 + 2 * NUMBER_WIDTH, 100 + NUMBER_WIDTH]
    assert all(dest[1] == 20 for _, dest, _ in screen.blits)
    assert all(source is atlases["numbers"] for source, _, _ in screen.blits)


def test_draw_number_zero_still_fills_field(screen, atlases) -> None:
    make_renderer(screen, atlases).draw_number(0, 0, 0, 5, Color.WHITE)

    assert [area.x for _, _, area in screen.blits] == [0] * 5


def test_draw_number_truncates_to_low_digits(screen, atlases) -> None:
    make_renderer(screen, atlases).draw_number(0, 0, 12345, 3, Color.WHITE)

    digits = [area.x // NUMBER_WIDTH for _, _, area in screen.blits]
    assert digits == [5, 4, 3]


def test_draw_number_color_selects_atlas_row(screen, atlases) -> None:
    make_renderer(screen, atlases).draw_number(0, 0, 42, 2, Color.PURPLE)

    for _, _, area in screen.blits:
        assert area.y == NUMBER_HEIGHT * Color.PURPLE
        assert area.size == (NUMBER_WIDTH, NUMBER_HEIGHT)
