"""Two-dimensional scene objects: shapes and images, rendered as draw commands."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

from PIL import Image

from artiframe.color import ALICE_BLUE, BLACK, CHARTREUSE, Color

Point = tuple[float, float]
TrianglePoints = tuple[Point, Point, Point]
RectGeometry = tuple[float, float, float, float]


@dataclass(frozen=True)
class DrawRect:
    """An axis-aligned rectangle with its top-left corner at (x, y)."""

    x: float
    y: float
    width: float
    height: float
    color: Color
    filled: bool = True
    line_width: float = 0


@dataclass(frozen=True)
class DrawTriangle:
    """A triangle given by three points."""

    p1: Point
    p2: Point
    p3: Point
    color: Color
    filled: bool = True
    line_width: float = 0


@dataclass(frozen=True)
class DrawCircle:
    """A circle given by its centre and radius."""

    cx: float
    cy: float
    radius: float
    color: Color
    filled: bool = True
    line_width: float = 0


@dataclass(frozen=True)
class DrawEllipse:
    """An ellipse given by its centre and its full width and height."""

    cx: float
    cy: float
    width: float
    height: float
    color: Color
    filled: bool = True
    line_width: float = 0


@dataclass(frozen=True)
class DrawImage:
    """A bitmap drawn with its top-left corner at (x, y)."""

    x: float
    y: float
    image: Image.Image


DrawCommand = DrawRect | DrawTriangle | DrawCircle | DrawEllipse | DrawImage


def _tdiv(value: float, divisor: int) -> int:
    """Integer division truncating toward zero."""
    return int(int(value) / divisor)


@dataclass
class Object2D(ABC):
    """Base of every element placed in the 2D scene."""

    name: str = ""
    original_name: str = ""
    x: float = 0.0
    y: float = 0.0
    color: Color = ALICE_BLUE
    opacity: int = 255

    @abstractmethod
    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        """Return the draw commands for this object shifted by the offset."""

    @abstractmethod
    def rotate90(self) -> None:
        """Rotate the object by a quarter turn."""

    def set_color(self, color: Color) -> None:
        self.color = color


@dataclass
class Shape(Object2D):
    """A filled geometric shape with an optional outline."""

    height: int = 100
    width: int = 150
    nb_apex: int = 5
    fill_color: Color = CHARTREUSE
    outline_color: Color = BLACK
    outline: bool = False

    def _passes(self) -> Iterator[tuple[Color, bool, float]]:
        yield self.fill_color.with_alpha(self.opacity), True, 0
        if self.outline:
            yield self.outline_color.with_alpha(self.opacity), False, 1

    def _swap_dimensions(self) -> None:
        original_height = int(self.height)
        self.height = self.width
        self.width = original_height


@dataclass
class Square(Shape):
    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        px, py = self.x + offset_x, self.y + offset_y
        return [
            DrawRect(px, py, self.width, self.width, color, filled, line)
            for color, filled, line in self._passes()
        ]

    def rotate90(self) -> None:
        """A square looks the same after a quarter turn."""


@dataclass
class Rectangle(Shape):
    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        px, py = self.x + offset_x, self.y + offset_y
        return [
            DrawRect(px, py, self.width, self.height, color, filled, line)
            for color, filled, line in self._passes()
        ]

    def rotate90(self) -> None:
        self._swap_dimensions()


@dataclass
class Circle(Shape):
    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        half = _tdiv(self.width, 2)
        cx = self.x + half + offset_x
        cy = self.y + half + offset_y
        return [
            DrawCircle(cx, cy, half, color, filled, line)
            for color, filled, line in self._passes()
        ]

    def rotate90(self) -> None:
        """A circle looks the same after a quarter turn."""


@dataclass
class Ellipse(Shape):
    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        cx = self.x + _tdiv(self.width, 2) + offset_x
        cy = self.y + _tdiv(self.height, 2) + offset_y
        return [
            DrawEllipse(cx, cy, self.width, self.height, color, filled, line)
            for color, filled, line in self._passes()
        ]

    def rotate90(self) -> None:
        self._swap_dimensions()


def _polar(center: Point, radius: float, angle: float) -> Point:
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


@dataclass
class RegularPolygon(Shape):
    angle_modifier: float = 0.0

    def _center(self, offset_x: float, offset_y: float) -> Point:
        half = _tdiv(self.width, 2)
        return (self.x + half + offset_x, self.y + half + offset_y)

    def polygon_triangles(self, center: Point) -> list[TrianglePoints]:
        """Return the fan of triangles making up the polygon around center."""
        if self.nb_apex <= 0:
            return []
        step = math.tau / self.nb_apex
        radius = _tdiv(self.width, 2)
        return [
            (
                _polar(center, radius, i * step + self.angle_modifier),
                _polar(center, radius, (i + 1) * step + self.angle_modifier),
                center,
            )
            for i in range(self.nb_apex)
        ]

    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        triangles = self.polygon_triangles(self._center(offset_x, offset_y))
        return [
            DrawTriangle(*points, color, filled, line)
            for color, filled, line in self._passes()
            for points in triangles
        ]

    def rotate90(self) -> None:
        self.angle_modifier += math.pi / 2


@dataclass
class Star(Shape):
    angle_modifier: float = 0.0

    def star_triangles(self, center: Point) -> list[TrianglePoints]:
        """Return two triangles per branch of the star around center."""
        if self.nb_apex <= 0:
            return []
        step = math.tau / self.nb_apex
        radius = _tdiv(self.width, 2)
        inner_radius = _tdiv(self.height, 2)
        triangles: list[TrianglePoints] = []
        for i in range(self.nb_apex):
            outer1 = _polar(center, radius, i * step + self.angle_modifier)
            outer2 = _polar(center, radius, (i + 1) * step + self.angle_modifier)
            inner = _polar(center, inner_radius, i * step + step / 2 + self.angle_modifier)
            triangles.append((outer1, center, inner))
            triangles.append((outer2, center, inner))
        return triangles

    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        half = _tdiv(self.width, 2)
        center = (self.x + half + offset_x, self.y + half + offset_y)
        triangles = self.star_triangles(center)
        return [
            DrawTriangle(*points, color, filled, line)
            for color, filled, line in self._passes()
            for points in triangles
        ]

    def rotate90(self) -> None:
        self.angle_modifier += math.pi / 2


@dataclass
class Arrow(Shape):
    """An arrow pointing right, down, left or up (angle 0 to 3)."""

    angle: int = 0

    def arrow_parts(self, position: Point) -> Optional[tuple[RectGeometry, TrianglePoints]]:
        """Return the shaft rectangle and head triangle, or None for an unknown angle."""
        px, py = position
        w = int(self.width)
        h = int(self.height)
        if self.angle == 0:
            return (
                (px, py + _tdiv(h, 4), w * 0.6, _tdiv(h, 2)),
                ((px + w - w * 0.4, py + h), (px + w - w * 0.4, py), (px + w, py + h * 0.5)),
            )
        if self.angle == 1:
            return (
                (px + _tdiv(h, 4), py, _tdiv(h, 2), w * 0.6),
                ((px + h, py + w - w * 0.4), (px, py + w - w * 0.4), (px + h * 0.5, py + w)),
            )
        if self.angle == 2:
            return (
                (px + w * 0.4, py + _tdiv(h, 4), w * 0.6, _tdiv(h, 2)),
                ((px + w * 0.4, py + h), (px + w * 0.4, py), (px, py + h * 0.5)),
            )
        if self.angle == 3:
            return (
                (px + _tdiv(h, 4), py + w * 0.4, _tdiv(h, 2), w * 0.6),
                ((px + h, py + w * 0.4), (px, py + w * 0.4), (px + h * 0.5, py)),
            )
        return None

    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        parts = self.arrow_parts((self.x + offset_x, self.y + offset_y))
        if parts is None:
            return []
        rect, triangle = parts
        commands: list[DrawCommand] = []
        for color, filled, line in self._passes():
            commands.append(DrawRect(*rect, color, filled, line))
            commands.append(DrawTriangle(*triangle, color, filled, line))
        return commands

    def rotate90(self) -> None:
        self.angle = 0 if self.angle == 3 else self.angle + 1


@dataclass
class ImageObject(Object2D):
    """A bitmap image placed in the scene."""

    data_img: Optional[Image.Image] = None
    path: str = ""

    @classmethod
    def from_file(cls, path: str) -> ImageObject:
        """Load an image from disk; raises OSError if it cannot be read."""
        with Image.open(path) as img:
            img.load()
            data = img.copy()
        return cls(data_img=data, path=str(path))

    def draw(self, offset_x: float, offset_y: float) -> list[DrawCommand]:
        if self.data_img is None:
            return []
        return [DrawImage(self.x + offset_x, self.y + offset_y, self.data_img)]

    def rotate90(self) -> None:
        """Turn the bitmap a quarter turn clockwise."""
        if self.data_img is not None:
            self.data_img = self.data_img.transpose(Image.Transpose.ROTATE_270)