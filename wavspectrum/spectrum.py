"""Magnitude spectrum of a WAV file and its bar chart."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from wavspectrum.plot import plot_data
from wavspectrum.wav_reader import WavFormatError, read_wav

DEFAULT_OUTPUT = "magnitude.png"
BIN_DIVISOR = 100
SHIFT_DIVISOR = 20


@dataclass(frozen=True)
class SpectrumLine:
    """One frequency of the spectrum with its truncated magnitude."""

    frequency: int
    magnitude: int


def magnitude_spectrum(samples: Iterable[int], sample_rate: int) -> list[SpectrumLine]:
    """Compute the DFT magnitudes of ``samples``, one line per distinct frequency.

    Frequencies are whole hertz; when several DFT bins fall on the same
    frequency only the first of them is kept.
    """
    values = np.asarray(list(samples), dtype=np.float64)
    count = values.size
    if count == 0:
        return []
    magnitudes = np.floor(np.abs(np.fft.fft(values))).astype(np.int64).tolist()

    lines: list[SpectrumLine] = []
    previous: int | None = None
    for index, magnitude in enumerate(magnitudes):
        frequency = index * sample_rate // count
        if frequency != previous:
            lines.append(SpectrumLine(frequency, magnitude))
        previous = frequency
    return lines


def frequency_bins(spectrum: Iterable[SpectrumLine]) -> list[int]:
    """Scale the magnitudes of a spectrum down for plotting."""
    return [line.magnitude // BIN_DIVISOR for line in spectrum]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wavspectrum",
        description="Plot the magnitude spectrum of a WAV file.",
    )
    parser.add_argument("file", nargs="?", help="WAV file to analyse")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print every frequency and magnitude"
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help="PNG file to write the chart to"
    )
    args = parser.parse_args(argv)
    if args.file is None:
        parser.print_usage(sys.stderr)
        return 1

    try:
        info = read_wav(args.file)
    except (OSError, WavFormatError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Audio Format: {info.audio_format}")
    print(f"Channels: {info.num_channels}")
    print(f"Sample Rate: {info.sample_rate} Hz")
    print(f"Bytes per Sample: {info.bytes_per_sample}")
    print(f"Data Size: {info.data_size} bytes")
    print(f"Number of Samples: {info.num_samples()}")

    spectrum = magnitude_spectrum(info.sample_data, info.sample_rate)
    if args.verbose:
        print("Frequency Domain Representation:")
        for line in spectrum:
            print(f"{line.frequency} Hz: {line.magnitude}")
    print(f"Total Frequencies: {len(spectrum)}")

    bins = frequency_bins(spectrum)
    # Leave out the lowest 5% of the frequencies, where the DC component sits.
    shown = bins[len(bins) // SHIFT_DIVISOR:]
    try:
        plot_data(shown, 0, len(shown), args.output)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0