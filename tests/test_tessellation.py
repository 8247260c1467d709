import pytest

from artiframe.tessellation import (
    DEFAULT_CORNERS,
    TessellationPatch,
    non_symmetric_plane,
    plane_quad_indices,
    plane_triangle_indices,
    read_text,
)

V0, V1, V2, V3 = (0, 0, 0), (4, 0, 0), (5, 3, 1), (-1, 2, 0)


@pytest.mark.parametrize("divisions", [1, 3, 8])
def test_plane_corners(divisions):
    plane = non_symmetric_plane(V0, V1, V2, V3, divisions)
    side = divisions + 1
    assert len(plane) == side * side
    assert plane[0][:3] == pytest.approx(V0)
    assert plane[divisions][:3] == pytest.approx(V1)
    assert plane[-1][:3] == pytest.approx(V2)
    assert plane[side * divisions][:3] == pytest.approx(V3)


def test_plane_texture_coordinates():
    plane = non_symmetric_plane(V0, V1, V2, V3, 4)
    assert plane[0][3:] == (0.0, 0.0)
    assert plane[-1][3:] == (1.0, 1.0)
    assert all(0 <= u <= 1 and 0 <= v <= 1 for *_, u, v in plane)


def test_plane_rejects_zero_divisions():
    with pytest.raises(ValueError):
        non_symmetric_plane(V0, V1, V2, V3, 0)


@pytest.mark.parametrize("divisions", [1, 2, 8])
def test_triangle_indices(divisions):
    triangles = plane_triangle_indices(divisions)
    assert len(triangles) == 2 * divisions * divisions
    assert triangles[0] == (0, divisions + 2, divisions + 1)
    assert all(0 <= i < (divisions + 1) ** 2 for tri in triangles for i in tri)


@pytest.mark.parametrize("divisions", [1, 2, 8])
def test_quad_indices(divisions):
    quads = plane_quad_indices(divisions)
    assert len(quads) == divisions * divisions
    assert quads[0] == (0, 1, divisions + 2, divisions + 1)
    assert all(len(set(q)) == 4 for q in quads)
    assert max(i for q in quads for i in q) == (divisions + 1) ** 2 - 1


def test_read_text_without_final_newline(tmp_path):
    path = tmp_path / "shader.vert"
    path.write_text("line one\nline two", encoding="utf-8")
    assert read_text(path) == "line one\nline two\n"


def test_read_text_with_final_newline(tmp_path):
    path = tmp_path / "shader.frag"
    path.write_text("line one\nline two\n", encoding="utf-8")
    assert read_text(path) == "line one\nline two\n"


def test_read_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "missing.tesc")


def test_patch_geometry():
    patch = TessellationPatch()
    assert len(patch.vertices) == (patch.divisions + 1) ** 2
    assert len(patch.indices) == patch.divisions ** 2
    assert patch.patch_vertices == 4
    assert patch.vertices[0][:3] == pytest.approx(DEFAULT_CORNERS[0])
    assert patch.vertices[-1][:3] == pytest.approx(DEFAULT_CORNERS[2])


def test_patches_are_quads_inside_the_plane():
    patch = TessellationPatch(divisions=3)
    quads = list(patch.patches())
    assert len(quads) == 9
    for quad in quads:
        assert len(quad) == 4
        for x, y, z in quad:
            assert -0.5 - 1e-9 <= x <= 0.5 + 1e-9
            assert -0.5 - 1e-9 <= y <= 0.5 + 1e-9


def test_mouse_uniform():
    patch = TessellationPatch()
    assert patch.mouse_uniform(0, 0, 1900, 1000) == (0.0, 1.0)
    u, v = patch.mouse_uniform(1900, 1000, 1900, 1000)
    assert (v, u) == patch.mouse_uniform(0, 0, 1900, 1000)


def test_mouse_uniform_rejects_empty_window():
    with pytest.raises(ValueError):
        TessellationPatch().mouse_uniform(1, 1, 0, 1000)