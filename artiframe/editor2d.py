"""The 2D editor: the renderer, the colour histogram and the list of scene elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PureWindowsPath
from typing import Optional

from PIL import Image

from artiframe.color import Color
from artiframe.shapes2d import (
    Arrow,
    Circle,
    DrawCommand,
    Ellipse,
    ImageObject,
    Object2D,
    Rectangle,
    RegularPolygon,
    Shape,
    Square,
    Star,
)

LEVELS = 256
SCROLLER_WIDTH = 255
DEFAULT_WIDTH = 1900
DEFAULT_HEIGHT = 1000
BACKGROUND = Color(31, 31, 31)

SHAPE_KINDS: dict[str, type[Shape]] = {
    "square": Square,
    "rectangle": Rectangle,
    "circle": Circle,
    "ellipse": Ellipse,
    "polygone régulier": RegularPolygon,
    "star": Star,
    "arrow": Arrow,
}


@dataclass
class Renderer2D:
    """The ordered layers of the scene and the drawing area they live in."""

    objects: list[Object2D] = field(default_factory=list)
    active: Optional[Object2D] = None
    active_index: int = -1
    offset_x1: int = 0
    offset_y1: int = 0
    offset_x2: int = 0
    offset_y2: int = 0
    background_color: Color = BACKGROUND
    text: str = ""

    def hit(self, x: float, y: float) -> bool:
        """Tell whether (x, y) lies strictly inside the drawing area."""
        return self.offset_x1 < x < self.offset_x2 and self.offset_y1 < y < self.offset_y2

    def draw(self) -> list[DrawCommand]:
        """Return the draw commands of every layer, bottom layer first."""
        return [
            command
            for obj in self.objects
            for command in obj.draw(self.offset_x1, self.offset_y1)
        ]


def _zeros() -> list[int]:
    return [0] * LEVELS


@dataclass
class Histogram:
    """Counts of each 8-bit level in the red, green and blue channels."""

    red: list[int] = field(default_factory=_zeros)
    green: list[int] = field(default_factory=_zeros)
    blue: list[int] = field(default_factory=_zeros)
    visible: bool = True

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            values = getattr(self, name)
            if len(values) != LEVELS:
                raise ValueError(f"{name} histogram needs {LEVELS} bins, got {len(values)}")
            setattr(self, name, list(values))

    @classmethod
    def from_image(cls, image: Image.Image) -> Histogram:
        """Count the channel levels of every pixel of the image."""
        counts = image.convert("RGB").histogram()
        return cls(
            counts[:LEVELS],
            counts[LEVELS:2 * LEVELS],
            counts[2 * LEVELS:3 * LEVELS],
        )

    def channel_max(self) -> tuple[int, int, int]:
        """Return the largest bin of the red, green and blue channels."""
        return (max(self.red), max(self.green), max(self.blue))


class Editor2D:
    """Scene elements, their names in the layer list and the active selection."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.renderer = Renderer2D(
            offset_x1=0,
            offset_y1=0,
            offset_x2=width - SCROLLER_WIDTH,
            offset_y2=height,
        )
        self.scroller: list[str] = []
        self.histogram = Histogram()

    def element_name(self, filename: str) -> str:
        """Return filename, suffixed with the count of elements already sharing it."""
        duplicate = sum(1 for obj in self.renderer.objects if obj.original_name == filename)
        return f"{filename} ({duplicate})" if duplicate > 0 else filename

    def add_element(self, obj: Object2D) -> None:
        """Put obj on top of the scene and make it active."""
        self.renderer.objects.append(obj)
        self.renderer.active = obj
        self.renderer.active_index += 1
        self.compute_histogram()

    def add_shape(self, kind: str) -> Shape:
        """Create a shape of the given kind, name it and add it to the scene."""
        try:
            shape_class = SHAPE_KINDS[kind]
        except KeyError:
            raise ValueError(f"unknown shape kind: {kind!r}") from None
        shape = shape_class()
        shape.original_name = kind
        shape.name = self.element_name(kind)
        self.scroller.append(shape.name)
        self.add_element(shape)
        return shape

    def import_image(self, path: str) -> Optional[ImageObject]:
        """Load an image and add it to the scene; return None if it cannot be read."""
        try:
            image = ImageObject.from_file(path)
        except OSError:
            return None
        filename = PureWindowsPath(str(path)).name
        image.original_name = filename
        image.name = self.element_name(filename)
        self.scroller.append(image.name)
        self.add_element(image)
        return image

    def select(self, index: int) -> Object2D:
        """Make the element at index active."""
        obj = self.renderer.objects[index]
        self.renderer.active = obj
        self.renderer.active_index = index
        self.compute_histogram()
        return obj

    def _swap_layers(self, other: int) -> None:
        r = self.renderer
        i = r.active_index
        self.scroller[i], self.scroller[other] = self.scroller[other], self.scroller[i]
        r.objects[i], r.objects[other] = r.objects[other], r.objects[i]
        r.active_index = other
        r.active = r.objects[other]

    def layer_up(self) -> None:
        """Move the active element one layer up, unless it is already on top."""
        r = self.renderer
        if r.active is not None and r.active_index < len(r.objects) - 1:
            self._swap_layers(r.active_index + 1)

    def layer_down(self) -> None:
        """Move the active element one layer down, unless it is already at the bottom."""
        r = self.renderer
        if r.active is not None and r.active_index > 0:
            self._swap_layers(r.active_index - 1)

    def delete_selected(self) -> None:
        """Remove the active element and leave nothing selected."""
        r = self.renderer
        if r.active is None:
            return
        position = next((i for i, obj in enumerate(r.objects) if obj is r.active), None)
        if position is None:
            raise ValueError("the active element is not in the scene")
        del r.objects[position]
        if 0 <= r.active_index < len(self.scroller):
            del self.scroller[r.active_index]
        r.active_index = -1
        r.active = None

    def delete_all(self) -> None:
        """Remove every element."""
        self.renderer.objects.clear()
        self.scroller.clear()
        self.renderer.active_index = -1
        self.renderer.active = None

    def remove_active_object(self) -> None:
        """Remove the active element and select the bottom layer if any is left."""
        r = self.renderer
        if r.active is None:
            return
        del r.objects[r.active_index]
        if 0 <= r.active_index < len(self.scroller):
            del self.scroller[r.active_index]
        if r.objects:
            r.active = r.objects[0]
            r.active_index = 0
        else:
            r.active = None
            r.active_index = -1

    def compute_histogram(self) -> Histogram:
        """Recount the histogram from the active image; all zeros otherwise."""
        active = self.renderer.active
        if isinstance(active, ImageObject) and active.data_img is not None:
            self.histogram = Histogram.from_image(active.data_img)
        else:
            self.histogram = Histogram()
        return self.histogram