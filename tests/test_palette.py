from iffilbm import build_palette
from iffilbm.bmhd import CAMG_EHB, CAMG_HAM


def test_pads_to_plane_count():
    pal = build_palette(bytes([1, 2, 3, 4, 5, 6]), 0, 3)
    assert pal == [(1, 2, 3), (4, 5, 6)] + [(0, 0, 0)] * 6


def test_missing_cmap_is_black():
    assert build_palette(None, 0, 2) == [(0, 0, 0)] * 4


def test_partial_triplet_ignored():
    assert build_palette(bytes([9, 8, 7, 6]), 0, 1) == [(9, 8, 7), (0, 0, 0)]


def test_size_capped_at_256():
    assert len(build_palette(None, 0, 24)) == 256
    assert len(build_palette(None, 0, 12)) == 256


def test_extra_entries_dropped():
    pal = build_palette(bytes(range(12)), 0, 1)
    assert pal == [(0, 1, 2), (3, 4, 5)]


def test_ehb_halves_first_32():
    colors = [(i * 8, 255 - i, i | 1) for i in range(32)]
    pal = build_palette(bytes(c for rgb in colors for c in rgb), CAMG_EHB, 6)
    assert len(pal) == 64
    assert pal[:32] == colors
    assert pal[32:] == [(r >> 1, g >> 1, b >> 1) for r, g, b in colors]


def test_ehb_ignores_cmap_upper_half():
    colors = [(255, 255, 255)] * 64
    pal = build_palette(bytes(c for rgb in colors for c in rgb), CAMG_EHB, 6)
    assert len(pal) == 64
    assert pal[32:] == [(127, 127, 127)] * 32


def test_ehb_with_short_cmap():
    pal = build_palette(bytes([200, 100, 50]), CAMG_EHB, 6)
    assert len(pal) == 64
    assert pal[32] == (100, 50, 25)
    assert pal[33:] == [(0, 0, 0)] * 31


def test_ehb_needs_six_planes():
    pal = build_palette(bytes([200, 100, 50]), CAMG_EHB, 5)
    assert len(pal) == 32
    assert pal[1:] == [(0, 0, 0)] * 31


def test_ham_flag_does_not_change_palette():
    assert build_palette(bytes([1, 2, 3]), CAMG_HAM, 6) == build_palette(bytes([1, 2, 3]), 0, 6)
