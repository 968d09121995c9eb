import pytest
from PIL import Image

from wavspectrum.plot import (
    AXIS_COLOUR,
    BACKGROUND,
    BAR_COLOUR,
    GRAPH_PADDING,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    plot_data,
)


def _colours(image):
    return {colour for _, colour in image.convert("RGB").getcolors(maxcolors=1 << 22)}


def test_writes_png_of_fixed_size(tmp_path):
    out = tmp_path / "chart.png"
    plot_data([1, 5, 3, 8], 0, 4, out)
    with Image.open(out) as saved:
        assert saved.format == "PNG"
        assert saved.size == (IMAGE_WIDTH, IMAGE_HEIGHT)


def test_returned_image_matches_file(tmp_path):
    out = tmp_path / "chart.png"
    image = plot_data([2, 4, 6], 0, 3, out)
    with Image.open(out) as saved:
        assert list(saved.convert("RGB").getdata()) == list(image.getdata())


def test_background_and_axis(tmp_path):
    image = plot_data([0, 10], 0, 2, tmp_path / "chart.png")
    assert image.getpixel((0, 0)) == BACKGROUND
    assert image.getpixel((IMAGE_WIDTH // 2, IMAGE_HEIGHT - GRAPH_PADDING)) == AXIS_COLOUR


def test_bars_are_drawn_for_values_above_minimum(tmp_path):
    image = plot_data([0, 10], 0, 2, tmp_path / "chart.png")
    # the second bar spans the right half of the graph at full height
    assert image.getpixel((600, 300)) == BAR_COLOUR
    # the minimum value has no bar
    assert image.getpixel((200, 300)) == BACKGROUND


def test_constant_series_draws_no_bars(tmp_path):
    image = plot_data([4, 4, 4], 0, 3, tmp_path / "chart.png")
    assert BAR_COLOUR not in _colours(image)


def test_long_series_is_split_into_rows(tmp_path):
    values = list(range(1, 4501))
    image = plot_data(values, 0, len(values), tmp_path / "chart.png")
    upper = image.crop((0, 0, IMAGE_WIDTH, 260))
    lower = image.crop((0, 300, IMAGE_WIDTH, IMAGE_HEIGHT))
    assert BAR_COLOUR in _colours(upper)
    assert BAR_COLOUR in _colours(lower)


def test_accepts_any_iterable(tmp_path):
    from_list = plot_data([3, 1, 2], 0, 3, tmp_path / "a.png")
    from_gen = plot_data((v for v in [3, 1, 2]), 0, 3, tmp_path / "b.png")
    assert list(from_list.getdata()) == list(from_gen.getdata())


def test_empty_values_rejected(tmp_path):
    with pytest.raises(ValueError):
        plot_data([], 0, 10, tmp_path / "chart.png")
    assert not (tmp_path / "chart.png").exists()


@pytest.mark.parametrize("x_min, x_max", [(5, 5), (10, 2)])
def test_bad_x_range_rejected(tmp_path, x_min, x_max):
    with pytest.raises(ValueError):
        plot_data([1, 2], x_min, x_max, tmp_path / "chart.png")