"""Geometry of a subdivided quad plane drawn as tessellation patches."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence, Union

Vec3 = tuple[float, float, float]
PlaneVertex = tuple[float, float, float, float, float]

SHADER_STAGES = {
    "vertex": "shaders/tessellation.vert",
    "fragment": "shaders/tessellation.frag",
    "control": "shaders/tessellation.tesc",
    "evaluation": "shaders/tessellation.tese",
}

DEFAULT_CORNERS: tuple[Vec3, Vec3, Vec3, Vec3] = (
    (-0.5, -0.5, 0.0),
    (0.5, -0.5, 0.0),
    (0.5, 0.5, 0.0),
    (-0.5, 0.5, 0.0),
)


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _mul(a: Sequence[float], s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _div(a: Sequence[float], s: float) -> Vec3:
    return (a[0] / s, a[1] / s, a[2] / s)


def non_symmetric_plane(
    v0: Sequence[float],
    v1: Sequence[float],
    v2: Sequence[float],
    v3: Sequence[float],
    divisions: int,
) -> list[PlaneVertex]:
    """Return (x, y, z, u, v) vertices of a plane split into divisions per side."""
    if divisions < 1:
        raise ValueError(f"divisions must be at least 1: {divisions!r}")
    d = float(divisions)
    dir03 = _div(_sub(v3, v0), d)
    dir12 = _div(_sub(v2, v1), d)
    vertices: list[PlaneVertex] = []
    for i in range(divisions + 1):
        start = _add(v0, _mul(dir03, i))
        across = _div(_sub(_add(v1, _mul(dir12, i)), start), d)
        for j in range(divisions + 1):
            x, y, z = _add(start, _mul(across, j))
            vertices.append((x, y, z, j / d, i / d))
    return vertices


def plane_triangle_indices(divisions: int) -> list[tuple[int, int, int]]:
    """Return two triangles per cell of the plane grid."""
    side = divisions + 1
    triangles: list[tuple[int, int, int]] = []
    for row in range(divisions):
        for col in range(divisions):
            index = row * side + col
            triangles.append((index, index + side + 1, index + side))
            triangles.append((index, index + 1, index + side + 1))
    return triangles


def plane_quad_indices(divisions: int) -> list[tuple[int, int, int, int]]:
    """Return one four-vertex patch per cell of the plane grid."""
    side = divisions + 1
    return [
        (index, index + 1, index + side + 1, index + side)
        for row in range(divisions)
        for index in (row * side + col for col in range(divisions))
    ]


def read_text(path: Union[str, Path]) -> str:
    """Read a text file, ending every line with a newline."""
    text = Path(path).read_text(encoding="utf-8")
    if not text:
        return ""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return "".join(f"{line}\n" for line in lines)


@dataclass
class TessellationPatch:
    """A subdivided quad plane whose cells are drawn as four-vertex patches."""

    divisions: int = 8
    corners: tuple[Vec3, Vec3, Vec3, Vec3] = DEFAULT_CORNERS
    vertices: list[PlaneVertex] = field(init=False)
    indices: list[tuple[int, int, int, int]] = field(init=False)
    patch_vertices: int = field(default=4, init=False)

    def __post_init__(self) -> None:
        self.vertices = non_symmetric_plane(*self.corners, self.divisions)
        self.indices = plane_quad_indices(self.divisions)

    def mouse_uniform(
        self, mouse_x: float, mouse_y: float, window_width: float, window_height: float
    ) -> tuple[float, float]:
        """Return the mouse position normalised to the window, y pointing up."""
        if window_width <= 0 or window_height <= 0:
            raise ValueError("window size must be positive")
        return (mouse_x / window_width, 1.0 - mouse_y / window_height)

    def patches(self) -> Iterator[tuple[Vec3, ...]]:
        """Yield the corner positions of every patch."""
        for quad in self.indices:
            yield tuple(self.vertices[k][:3] for k in quad)