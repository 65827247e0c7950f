import numpy as np
import pytest

from rendercore.text2d import build_text_mesh, glyph_uv


def test_glyph_zero_is_origin():
    assert glyph_uv("\x00") == (0.0, 0.0)


def test_glyph_columns_step_by_cell():
    u0, v0 = glyph_uv("@")
    u1, v1 = glyph_uv("A")
    assert v1 == v0
    assert u1 - u0 == pytest.approx(1.0 / 16.0)


def test_glyph_rows_step_by_cell():
    u0, v0 = glyph_uv("!")
    u1, v1 = glyph_uv(chr(ord("!") + 16))
    assert u1 == u0
    assert v1 - v0 == pytest.approx(1.0 / 16.0)


def test_glyph_accepts_int_code():
    assert glyph_uv(ord("Z")) == glyph_uv("Z")


def test_glyph_rejects_wide_code():
    with pytest.raises(ValueError):
        glyph_uv(300)


def test_mesh_has_six_corners_per_character():
    mesh = build_text_mesh("Hello", 0, 0, 10)
    assert len(mesh) == 30
    assert mesh.uvs.shape == (30, 2)


def test_empty_text_gives_empty_mesh():
    mesh = build_text_mesh("", 5, 5, 8)
    assert len(mesh) == 0
    assert mesh.vertices.shape == (0, 2)


def test_first_triangle_corners():
    mesh = build_text_mesh("a", 10, 20, 5)
    assert mesh.vertices[:3].tolist() == [[10, 25], [10, 20], [15, 25]]


def test_vertices_stay_in_text_box():
    text, x, y, size = "abcd", 3, 7, 12
    mesh = build_text_mesh(text, x, y, size)
    assert mesh.vertices[:, 0].min() == x
    assert mesh.vertices[:, 0].max() == x + len(text) * size
    assert mesh.vertices[:, 1].min() == y
    assert mesh.vertices[:, 1].max() == y + size


def test_uvs_stay_in_glyph_cell():
    mesh = build_text_mesh("A", 0, 0, 16)
    u, v = glyph_uv("A")
    assert np.allclose(mesh.uvs.min(axis=0), [u, v])
    assert np.allclose(mesh.uvs.max(axis=0), [u + 1 / 16, v + 1 / 16])


def test_bytes_and_str_agree():
    a = build_text_mesh("xyz", 1, 2, 3)
    b = build_text_mesh(b"xyz", 1, 2, 3)
    assert np.array_equal(a.vertices, b.vertices)
    assert np.array_equal(a.uvs, b.uvs)