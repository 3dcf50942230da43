import pytest

from raytracer.errors import OutOfBounds
from raytracer.image import Image, Ppm


def test_image_is_abstract():
    with pytest.raises(TypeError):
        Image(1, 1)


def test_new_image_is_black():
    image = Ppm(3, 2)
    assert image.dimensions() == (3, 2)
    assert image.data() == [(0.0, 0.0, 0.0)] * 6


def test_set_and_get():
    image = Ppm(2, 2)
    image.set_at(1, 1, (0.5, 0.25, 1.0))
    assert image.at(1, 1) == (0.5, 0.25, 1.0)
    assert image.at(0, 0) == (0.0, 0.0, 0.0)


def test_coordinates_wrap_within_buffer():
    image = Ppm(2, 2)
    image.set_at(0, 1, (1.0, 0.0, 0.0))
    assert image.at(2, 0) == image.at(0, 1)


def test_out_of_bounds():
    image = Ppm(2, 2)
    with pytest.raises(OutOfBounds) as info:
        image.at(0, 2)
    assert str(info.value) == "Out of bounds: 4"
    with pytest.raises(OutOfBounds):
        image.set_at(5, 5, (0, 0, 0))


def test_bad_color_rejected():
    with pytest.raises(ValueError):
        Ppm(1, 1).set_at(0, 0, (1.0, 2.0))


def test_add_images():
    first = Ppm(2, 1)
    second = Ppm(2, 1)
    first.set_at(0, 0, (0.25, 0.5, 0.0))
    second.set_at(0, 0, (0.25, 0.0, 0.5))
    second.set_at(1, 0, (1.0, 1.0, 1.0))
    first += second
    assert first.at(0, 0) == (0.5, 0.5, 0.5)
    assert first.at(1, 0) == (1.0, 1.0, 1.0)


def test_add_buffer():
    image = Ppm(1, 1)
    image += [(0.5, 0.5, 0.5)]
    assert image.at(0, 0) == (0.5, 0.5, 0.5)


def test_add_size_mismatch():
    image = Ppm(2, 1)
    with pytest.raises(ValueError):
        image += Ppm(1, 1)


def test_render_header_and_pixels():
    image = Ppm(2, 1)
    image.set_at(0, 0, (0.5, 0.25, 0.0))
    lines = image.render().splitlines()
    assert lines[:3] == ["P3", "2 1", "1023"]
    assert lines[3] == "512 256 0"
    assert lines[4] == "0 0 0"
    assert len(lines) == 5


def test_save_writes_render(tmp_path):
    image = Ppm(2, 2)
    image.set_at(1, 0, (1.0, 0.5, 0.0))
    target = tmp_path / "out"
    image.save(str(target))
    written = (tmp_path / "out.ppm").read_text()
    assert written == image.render()