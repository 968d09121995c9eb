"""Bar chart rendering of integer series to PNG images."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from PIL import Image, ImageDraw, ImageFont

SCALE_FACTOR = 2
IMAGE_WIDTH = 1920 // SCALE_FACTOR
IMAGE_HEIGHT = 1080 // SCALE_FACTOR
MAX_SAMPLES_PER_LINE = 4000
GRAPH_PADDING = 50
X_TICKS = 10

BACKGROUND = (255, 255, 255)
AXIS_COLOUR = (0, 0, 0)
BAR_COLOUR = (26, 51, 204)
AXIS_WIDTH = 2
TICK_LENGTH = 5
LABEL_OFFSET = 15
BAR_FILL_RATIO = 0.8


def _line_ranges(num_samples: int, per_line: int) -> Iterator[tuple[int, int]]:
    for start in range(0, num_samples, per_line):
        yield start, min(start + per_line, num_samples)


def _draw_label(draw: ImageDraw.ImageDraw, font, x: float, baseline: float, text: str) -> None:
    """Draw ``text`` with its baseline at ``baseline``."""
    _, _, _, bottom = draw.textbbox((0, 0), text, font=font)
    draw.text((x, baseline - bottom), text, fill=AXIS_COLOUR, font=font)


def plot_data(
    y_values: Iterable[int],
    x_min: int,
    x_max: int,
    output_file: str | os.PathLike[str],
) -> Image.Image:
    """Draw ``y_values`` as vertical bars and save the chart as a PNG file.

    Series longer than ``MAX_SAMPLES_PER_LINE`` are split into rows stacked
    from the top down. The x-axis labels map sample positions onto the range
    from ``x_min`` to ``x_max``. Returns the rendered image.
    """
    values = list(y_values)
    if not values:
        raise ValueError("y_values is empty")
    if x_min >= x_max:
        raise ValueError("x_min is greater than or equal to x_max")

    num_samples = len(values)
    per_line = min(num_samples, MAX_SAMPLES_PER_LINE)
    y_min, y_max = min(values), max(values)

    graph_height = IMAGE_HEIGHT - 2 * GRAPH_PADDING
    graph_width = IMAGE_WIDTH - 2 * GRAPH_PADDING
    baseline = IMAGE_HEIGHT - GRAPH_PADDING

    image = Image.new("RGB", (IMAGE_WIDTH, IMAGE_HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    draw.line(
        [(GRAPH_PADDING, baseline), (IMAGE_WIDTH - GRAPH_PADDING, baseline)],
        fill=AXIS_COLOUR,
        width=AXIS_WIDTH,
    )

    lines = -(-num_samples // per_line)
    row_height = graph_height / lines
    x_scale = graph_width / per_line
    tick_spacing = graph_width / (X_TICKS - 1)
    rows = [
        (start, end, (lines - line - 1) * row_height)
        for line, (start, end) in enumerate(_line_ranges(num_samples, per_line))
    ]

    for start, end, y_offset in rows:
        axis_y = baseline - y_offset
        for tick in range(X_TICKS):
            sample_index = start + tick * (end - start) // (X_TICKS - 1)
            if sample_index >= end:
                break
            x_value = x_min + sample_index * (x_max - x_min) // num_samples
            x = GRAPH_PADDING + tick * tick_spacing
            _draw_label(draw, font, x, axis_y + LABEL_OFFSET, str(x_value))
            draw.line(
                [(x, axis_y), (x, axis_y - TICK_LENGTH)],
                fill=AXIS_COLOUR,
                width=AXIS_WIDTH,
            )

    if y_max > y_min:
        y_scale = graph_height / (y_max - y_min) / lines
        for start, end, y_offset in rows:
            for position, value in enumerate(values[start:end]):
                bar_height = (value - y_min) * y_scale
                if bar_height <= 0:
                    continue
                x = GRAPH_PADDING + position * x_scale
                top = baseline - y_offset - bar_height
                draw.rectangle(
                    [x, top, x + x_scale * BAR_FILL_RATIO, top + bar_height],
                    fill=BAR_COLOUR,
                )

    image.save(output_file, format="PNG")
    return image