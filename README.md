# artiframe

`artiframe` holds the model behind a small 2D graphics editor. It manages the scene state
and the geometry: shapes, layers, names, selection, colour histograms and colour conversion.
It also includes two geometry helpers, a Delaunay triangulation and a tessellation patch grid.
The package does not draw anything itself. Drawing methods return plain drawing primitives,
and you pass those to a rendering backend of your choice.

## Installation

```
pip install artiframe
```

To install the test tools as well:

```
pip install "artiframe[test]"
```

## Shapes

`artiframe.shapes2d` defines these scene elements:

- `Square`, `Rectangle`, `Circle`, `Ellipse`, `RegularPolygon`, `Star` and `Arrow`. These are
  subclasses of `Shape`, which is itself a subclass of `Object2D`.
- `ImageObject`, which wraps a Pillow image. `ImageObject.from_file(path)` loads an image from
  a file and raises `OSError` if the file cannot be read.

Each element has a position (`x`, `y`), an `opacity` and a `name`. Shapes also have `width`,
`height`, `nb_apex`, `fill_color`, `outline_color` and `outline`.

`draw(offset_x, offset_y)` returns a list of drawing primitives: `DrawRect`, `DrawTriangle`,
`DrawCircle`, `DrawEllipse` and `DrawImage`. A shape always produces one filled pass. If
`outline` is set, it adds a second pass that draws the outline.

`rotate90()` behaves differently for each element:

- Rectangles and ellipses swap their width and height.
- Polygons and stars turn by a quarter turn.
- Arrows cycle through right, down, left and up.
- Images are turned a quarter turn clockwise.
- Squares and circles do not change.

`RegularPolygon.polygon_triangles(center)`, `Star.star_triangles(center)` and
`Arrow.arrow_parts(position)` give you the raw geometry of those shapes.

## The editor

`artiframe.editor2d.Editor2D` manages the layer stack. Its `renderer` is a `Renderer2D`, and
its `scroller` is the list of layer names.

```python
from artiframe.editor2d import Editor2D

editor = Editor2D()
editor.add_shape("square")
editor.add_shape("square")        # named "square (1)"
editor.layer_down()
histogram = editor.compute_histogram()
editor.delete_all()
```

`add_shape(kind)` accepts the following kinds:

- `"square"`
- `"rectangle"`
- `"circle"`
- `"ellipse"`
- `"polygone régulier"`
- `"star"`
- `"arrow"`

Any other kind raises `ValueError`.

`import_image(path)` adds an image to the scene. It names the image after the file and
returns `None` if the file cannot be loaded.

Other methods:

- `select(index)`
- `layer_up()`
- `layer_down()`
- `delete_selected()`
- `remove_active_object()`
- `delete_all()`

`Renderer2D.hit(x, y)` tells you whether a point lies inside the drawing area.
`Renderer2D.draw()` returns the primitives of every layer, starting with the bottom layer.

`Histogram` counts the 256 levels of each of the red, green and blue channels.
`Editor2D.compute_histogram()` builds it from the active image. If the active element is not
an image, every count is zero. `channel_max()` returns the largest bin of each channel.

## Colour

`artiframe.color.Color` is an immutable RGBA colour. Each channel must lie between 0 and 255.
It converts to and from hue, saturation and brightness, all on a 0–255 scale:

```python
from artiframe.color import Color, rgb_to_hsb

Color.from_hsb(0, 255, 255, 255)   # pure red
rgb_to_hsb(0, 0, 255)
```

## Music

`artiframe.music.MusicPlayer` controls a background track with `start(path)`, `pause()`,
`resume()` and `restart()`.

By default it uses `SoundChannel`, which only records which track is loaded and whether it is
playing or paused. It does not output any audio. To produce sound, pass a channel object that
has the same `is_playing`, `load`, `play`, `stop` and `set_paused` members.

## Geometry helpers

`artiframe.triangulation` performs Bowyer–Watson Delaunay triangulation of points in the XY
plane. You can call `delaunay(points)` directly, or collect points with a `Triangulation`
object. The returned `Triangle` indices refer to the order in which you gave the points.
`circumcircle(...)` runs the circumcircle test on its own.

```python
from artiframe.triangulation import delaunay

triangles = delaunay([(0, 0), (1, 0), (0, 1), (1, 1)])
```

`artiframe.tessellation` builds a subdivided quad plane. The functions are:

- `non_symmetric_plane(...)` returns the vertices, each with UVs.
- `plane_triangle_indices(divisions)` returns triangle indices.
- `plane_quad_indices(divisions)` returns four-vertex patch indices.
- `read_text(path)` reads a shader source file.

`TessellationPatch` ties these together. Its `patches()` method yields the corners of each
patch. Its `mouse_uniform(...)` method normalises the mouse position to the window.

## What the package does not do

There is no window, no event loop and no command to run. Keyboard, mouse, menu and slider
handling is not included, so you have to call the editor methods yourself.

There is no 3D scene model. That means no 3D objects, lights, transformations or Bézier
curves and surfaces. The triangulation and tessellation helpers only return geometry.

## Running the tests

```
pytest
```