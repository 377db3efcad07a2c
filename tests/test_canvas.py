import pytest
from PIL import Image

from spherelib import Canvas, Color, STD_COLORS

RED = STD_COLORS['red']


def test_center_maps_to_middle_of_storage():
    canvas = Canvas(10, 10)
    canvas.put_pixel(0, 0, RED)
    assert canvas.img.getpixel((5, 5)) == tuple(RED)
    assert canvas.get_pixel(0, 0) == RED


def test_y_axis_points_up():
    canvas = Canvas(10, 10)
    canvas.put_pixel(-5, 5, RED)
    assert canvas.img.getpixel((0, 0)) == tuple(RED)


def test_fill_color():
    canvas = Canvas(4, 3, fill=STD_COLORS['white'])
    assert canvas.get_pixel(1, 1) == STD_COLORS['white']
    assert isinstance(canvas.get_pixel(1, 1), Color)


def test_write_on_boundary_succeeds():
    canvas = Canvas(10, 10)
    canvas.put_pixel(10 // 2 - 1, 0, RED)
    assert canvas.img.getpixel((9, 5)) == tuple(RED)


@pytest.mark.parametrize('x, y', [(5, 0), (6, 0), (-6, 0), (0, 6), (0, -5), (100, -100)])
def test_off_canvas_writes_are_dropped(x, y):
    canvas = Canvas(10, 10)
    before = canvas.tobytes()
    canvas.put_pixel(x, y, RED)
    assert canvas.tobytes() == before
    assert canvas.get_pixel(x, y) is None


@pytest.mark.parametrize('width, height', [(0, 10), (10, -1), (2.5, 3)])
def test_invalid_dimensions(width, height):
    with pytest.raises(ValueError):
        Canvas(width, height)


def test_save_round_trips(tmp_path):
    canvas = Canvas(7, 5)
    canvas.put_pixel(1, 1, RED)
    path = tmp_path / 'out.png'
    canvas.save(path)

    with Image.open(path) as img:
        assert img.size == (7, 5)
        assert img.convert('RGB').tobytes() == canvas.tobytes()


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        Canvas(3, 3).save(tmp_path / 'missing' / 'out.png')


def test_save_unknown_format_raises(tmp_path):
    with pytest.raises(OSError):
        Canvas(3, 3).save(tmp_path / 'out.notaformat')


def test_to_image_is_a_copy():
    canvas = Canvas(3, 3)
    img = canvas.to_image()
    img.putpixel((0, 0), tuple(RED))
    assert canvas.img.getpixel((0, 0)) == (0, 0, 0)


def test_save_read_only_format_raises(tmp_path):
    # Pillow can read PSD files but has no writer for them
    with pytest.raises(OSError):
        Canvas(3, 3).save(tmp_path / 'out.psd')
