import pytest
from PIL import Image

from artiframe.editor2d import Editor2D, Histogram, Renderer2D
from artiframe.shapes2d import Circle, ImageObject, Square


def _save_image(path, size=(4, 3), color=(10, 20, 30)):
    Image.new("RGB", size, color).save(path)
    return path


def test_hit_is_strictly_inside_area():
    renderer = Renderer2D(offset_x2=100, offset_y2=50)
    assert renderer.hit(10, 10) is True
    assert renderer.hit(0, 10) is False
    assert renderer.hit(100, 10) is False
    assert renderer.hit(10, 50) is False


def test_draw_concatenates_layers_in_order():
    first = Square(x=5, y=5)
    second = Circle(x=20, y=30)
    renderer = Renderer2D(objects=[first, second], offset_x1=3, offset_y1=4)
    assert renderer.draw() == first.draw(3, 4) + second.draw(3, 4)


def test_histogram_from_solid_image():
    image = Image.new("RGB", (4, 3), (10, 20, 30))
    hist = Histogram.from_image(image)
    assert hist.red[10] == 4 * 3
    assert hist.green[20] == 4 * 3
    assert hist.blue[30] == 4 * 3
    assert sum(hist.red) == sum(hist.green) == sum(hist.blue) == 4 * 3
    assert hist.channel_max() == (12, 12, 12)


def test_histogram_rejects_wrong_bin_count():
    with pytest.raises(ValueError):
        Histogram(red=[0] * 10)


def test_element_names_count_duplicates():
    editor = Editor2D()
    names = [editor.add_shape("square").name for _ in range(3)]
    assert names == ["square", "square (1)", "square (2)"]
    assert editor.scroller == names


def test_add_shape_unknown_kind():
    with pytest.raises(ValueError):
        Editor2D().add_shape("hexagon")


def test_add_shape_makes_it_active():
    editor = Editor2D()
    square = editor.add_shape("square")
    star = editor.add_shape("star")
    assert editor.renderer.active is star
    assert editor.renderer.active_index == 1
    assert editor.renderer.objects == [square, star]
    assert isinstance(square, Square)


def test_renderer_area_follows_window_size():
    editor = Editor2D(width=1000, height=600)
    assert editor.renderer.offset_x2 == 1000 - 255
    assert editor.renderer.offset_y2 == 600


def test_layer_up_and_down_swap_objects_and_names():
    editor = Editor2D()
    a = editor.add_shape("square")
    b = editor.add_shape("circle")
    editor.select(0)
    editor.layer_up()
    assert editor.renderer.objects == [b, a]
    assert editor.scroller == [b.name, a.name]
    assert editor.renderer.active is a
    assert editor.renderer.active_index == 1
    editor.layer_up()
    assert editor.renderer.objects == [b, a]
    editor.layer_down()
    assert editor.renderer.objects == [a, b]
    assert editor.renderer.active_index == 0
    editor.layer_down()
    assert editor.renderer.objects == [a, b]


def test_delete_selected_clears_selection():
    editor = Editor2D()
    a = editor.add_shape("square")
    editor.add_shape("circle")
    editor.delete_selected()
    assert editor.renderer.objects == [a]
    assert editor.scroller == [a.name]
    assert editor.renderer.active is None
    assert editor.renderer.active_index == -1


def test_delete_all_empties_scene():
    editor = Editor2D()
    editor.add_shape("square")
    editor.add_shape("arrow")
    editor.delete_all()
    assert editor.renderer.objects == []
    assert editor.scroller == []
    assert editor.renderer.active is None


def test_remove_active_object_selects_bottom_layer():
    editor = Editor2D()
    a = editor.add_shape("square")
    editor.add_shape("ellipse")
    editor.remove_active_object()
    assert editor.renderer.active is a
    assert editor.renderer.active_index == 0
    editor.remove_active_object()
    assert editor.renderer.objects == []
    assert editor.renderer.active_index == -1


def test_select_out_of_range():
    with pytest.raises(IndexError):
        Editor2D().select(3)


def test_import_image_adds_named_element(tmp_path):
    path = _save_image(tmp_path / "pic.png")
    editor = Editor2D()
    image = editor.import_image(str(path))
    assert isinstance(image, ImageObject)
    assert image.name == "pic.png"
    assert editor.scroller == ["pic.png"]
    assert editor.renderer.active is image
    assert editor.histogram.red[10] == 4 * 3
    again = editor.import_image(str(path))
    assert again.name == "pic.png (1)"


def test_import_unreadable_file_adds_nothing(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_text("not an image")
    editor = Editor2D()
    assert editor.import_image(str(bad)) is None
    assert editor.renderer.objects == []


def test_histogram_is_zero_for_shapes(tmp_path):
    editor = Editor2D()
    editor.import_image(str(_save_image(tmp_path / "a.png")))
    assert sum(editor.histogram.blue) == 4 * 3
    editor.add_shape("circle")
    assert editor.compute_histogram().channel_max() == (0, 0, 0)
    editor.select(0)
    assert editor.histogram.blue[30] == 4 * 3