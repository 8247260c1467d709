"""Delaunay triangulation of points in the XY plane (Bowyer-Watson)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Optional, Sequence

EPSILON = 0.000001

Vec3 = tuple[float, float, float]
CircleTest = tuple[bool, float, float, float]


@dataclass(frozen=True)
class Triangle:
    """Three vertex indices."""

    v1: int
    v2: int
    v3: int


def circumcircle(
    xp: float,
    yp: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
) -> Optional[CircleTest]:
    """Test (xp, yp) against the circumcircle of a triangle.

    Returns (inside, centre_x, centre_y, radius), or None when all three
    points lie on one horizontal line.
    """
    if abs(y1 - y2) < EPSILON and abs(y2 - y3) < EPSILON:
        return None

    if abs(y2 - y1) < EPSILON:
        m2 = -(x3 - x2) / (y3 - y2)
        mx2 = (x2 + x3) / 2.0
        my2 = (y2 + y3) / 2.0
        cx = (x2 + x1) / 2.0
        cy = m2 * (cx - mx2) + my2
    elif abs(y3 - y2) < EPSILON:
        m1 = -(x2 - x1) / (y2 - y1)
        mx1 = (x1 + x2) / 2.0
        my1 = (y1 + y2) / 2.0
        cx = (x3 + x2) / 2.0
        cy = m1 * (cx - mx1) + my1
    else:
        m1 = -(x2 - x1) / (y2 - y1)
        m2 = -(x3 - x2) / (y3 - y2)
        if m1 == m2:
            return (False, math.nan, math.nan, math.nan)
        mx1 = (x1 + x2) / 2.0
        mx2 = (x2 + x3) / 2.0
        my1 = (y1 + y2) / 2.0
        my2 = (y2 + y3) / 2.0
        cx = (m1 * mx1 - m2 * mx2 + my2 - my1) / (m1 - m2)
        cy = m1 * (cx - mx1) + my1

    rsqr = (x2 - cx) ** 2 + (y2 - cy) ** 2
    drsqr = (xp - cx) ** 2 + (yp - cy) ** 2
    return (drsqr <= rsqr, cx, cy, math.sqrt(rsqr))


def delaunay(points: Sequence[Sequence[float]]) -> list[Triangle]:
    """Triangulate the points by their x and y; indices refer to the input order."""
    pts = [(float(p[0]), float(p[1])) for p in points]
    n = len(pts)
    if n < 3:
        return []

    order = sorted(range(n), key=lambda idx: pts[idx][0])
    tab = [pts[idx] for idx in order]

    xs = [x for x, _ in tab]
    ys = [y for _, y in tab]
    xmin, xmax, ymin, ymax = min(xs), max(xs), min(ys), max(ys)
    dmax = max(xmax - xmin, ymax - ymin)
    xmid = (xmax + xmin) / 2.0
    ymid = (ymax + ymin) / 2.0
    tab += [
        (xmid - 20 * dmax, ymid - dmax),
        (xmid, ymid + 20 * dmax),
        (xmid + 20 * dmax, ymid - dmax),
    ]

    trimax = 4 * n
    triangles = [Triangle(n, n + 1, n + 2)]
    complete = [False]
    xc = yc = r = 0.0

    for i, (xp, yp) in enumerate(tab[:n]):
        edges: list[list[int]] = []
        j = 0
        while j < len(triangles):
            if complete[j]:
                j += 1
                continue
            tri = triangles[j]
            (x1, y1), (x2, y2), (x3, y3) = tab[tri.v1], tab[tri.v2], tab[tri.v3]
            result = circumcircle(xp, yp, x1, y1, x2, y2, x3, y3)
            inside = False
            if result is not None:
                inside, xc, yc, r = result
            if xc < xp and (xp - xc) ** 2 > r:
                complete[j] = True
            if inside:
                edges += [[tri.v1, tri.v2], [tri.v2, tri.v3], [tri.v3, tri.v1]]
                triangles[j] = triangles[-1]
                complete[j] = complete[-1]
                triangles.pop()
                complete.pop()
                continue
            j += 1

        for first, second in combinations(edges, 2):
            reversed_pair = first[0] == second[1] and first[1] == second[0]
            same_pair = first[0] == second[0] and first[1] == second[1]
            if reversed_pair or same_pair:
                first[:] = [-1, -1]
                second[:] = [-1, -1]

        for a, b in edges:
            if a < 0 or b < 0:
                continue
            if len(triangles) >= trimax:
                break
            triangles.append(Triangle(a, b, i))
            complete.append(False)

        if len(triangles) >= trimax:
            break

    k = 0
    while k < len(triangles):
        tri = triangles[k]
        if tri.v1 >= n or tri.v2 >= n or tri.v3 >= n:
            triangles[k] = triangles[-1]
            triangles.pop()
            continue
        k += 1

    return [Triangle(order[t.v1], order[t.v2], order[t.v3]) for t in triangles]


@dataclass
class Triangulation:
    """Points collected one by one and turned into a triangle mesh."""

    points: list[Vec3] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)
    mesh_vertices: list[Vec3] = field(default_factory=list)
    mesh_indices: list[int] = field(default_factory=list)

    def add_point(self, x: float, y: float, z: float) -> None:
        self.points.append((float(x), float(y), float(z)))

    def triangulate(self) -> list[Triangle]:
        """Rebuild the mesh from the points; with fewer than three, nothing changes."""
        if len(self.points) < 3:
            return self.triangles
        self.triangles = delaunay(self.points)
        self.mesh_vertices = list(self.points)
        self.mesh_indices = [
            index for tri in self.triangles for index in (tri.v1, tri.v2, tri.v3)
        ]
        return self.triangles