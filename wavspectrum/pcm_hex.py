"""Conversion of text files of hexadecimal PCM samples into WAV files."""

from __future__ import annotations

import argparse
import os
import re
import struct
import sys
from collections.abc import Iterable, Sequence
from enum import Enum

NUM_CHANNELS = 1
_PCM_FORMAT = 1
_FMT_CHUNK_SIZE = 16
_RIFF_SIZE_OFFSET = 36
_ULONG_MAX = 2**64 - 1

_HEADER = struct.Struct("<4si4s4sihhiihh4si")
_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class SampleFormat(Enum):
    """Sample layouts of the hex dumps, with the rate each is recorded at."""

    PCM16 = (3515 * 54, 16, "h")
    PCM8 = (3515 * 50, 8, "B")

    def __init__(self, sample_rate: int, bits_per_sample: int, struct_code: str) -> None:
        self.sample_rate = sample_rate
        self.bits_per_sample = bits_per_sample
        self.struct_code = struct_code

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8


def _parse_hex(text: str) -> int:
    """Parse the leading hexadecimal number of ``text`` as an unsigned long."""
    match = _HEX_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no hexadecimal number in {text!r}")
    sign, digits = match.groups()
    value = int(digits, 16)
    if value > _ULONG_MAX:
        raise ValueError(f"hexadecimal number out of range: {text!r}")
    if sign == "-":
        value = -value % (_ULONG_MAX + 1)
    return value


def hex_to_int16(text: str) -> int:
    """Parse a hex number and read its low 16 bits as two's complement."""
    value = _parse_hex(text) & 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def hex_to_uint8(text: str) -> int:
    """Parse a hex number and keep its low 8 bits."""
    return _parse_hex(text) & 0xFF


def wav_header(num_samples: int, sample_format: SampleFormat) -> bytes:
    """Build the 44-byte header of a mono PCM WAV file."""
    block_align = NUM_CHANNELS * sample_format.bytes_per_sample
    data_size = num_samples * block_align
    return _HEADER.pack(
        b"RIFF",
        _RIFF_SIZE_OFFSET + data_size,
        b"WAVE",
        b"fmt ",
        _FMT_CHUNK_SIZE,
        _PCM_FORMAT,
        NUM_CHANNELS,
        sample_format.sample_rate,
        sample_format.sample_rate * block_align,
        block_align,
        sample_format.bits_per_sample,
        b"data",
        data_size,
    )


def encode_wav(samples: Sequence[int], sample_format: SampleFormat) -> bytes:
    """Encode samples as a complete WAV file."""
    data = struct.pack(f"<{len(samples)}{sample_format.struct_code}", *samples)
    return wav_header(len(samples), sample_format) + data


def read_hex_samples(lines: Iterable[str], sample_format: SampleFormat) -> list[int]:
    """Parse one sample per non-empty line."""
    parse = hex_to_int16 if sample_format is SampleFormat.PCM16 else hex_to_uint8
    stripped = (line.removesuffix("\n") for line in lines)
    return [parse(line) for line in stripped if line]


def output_path_for(input_path: str | os.PathLike[str]) -> str:
    """Replace everything from the last dot of the path with ``.wav``."""
    path = os.fspath(input_path)
    dot = path.rfind(".")
    stem = path if dot < 0 else path[:dot]
    return stem + ".wav"


def hex_to_wav(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    sample_format: SampleFormat = SampleFormat.PCM16,
) -> int:
    """Convert a hex dump into a WAV file and return the number of samples."""
    with open(input_path, encoding="latin-1") as source:
        samples = read_hex_samples(source, sample_format)
    with open(output_path, "wb") as target:
        target.write(encode_wav(samples, sample_format))
    return len(samples)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pcm-hex-to-wav",
        description="Convert a file of hexadecimal PCM samples into a WAV file.",
    )
    parser.add_argument("input", nargs="?", help="file with one hex sample per line")
    parser.add_argument(
        "--byte",
        action="store_true",
        help="samples are unsigned 8-bit values instead of signed 16-bit ones",
    )
    args = parser.parse_args(argv)
    if args.input is None:
        parser.print_usage(sys.stderr)
        return 1

    sample_format = SampleFormat.PCM8 if args.byte else SampleFormat.PCM16
    output = output_path_for(args.input)
    try:
        hex_to_wav(args.input, output, sample_format)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"WAV file written: {output}")
    return 0