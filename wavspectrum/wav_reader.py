"""Reading of RIFF/WAVE headers and raw PCM sample data."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

import numpy as np

_RIFF_HEADER = struct.Struct("<4sI4s")
_CHUNK_HEADER = struct.Struct("<4sI")
# audio format, channels, sample rate, (byte rate, block align skipped), bits per sample
_FMT_FIELDS = struct.Struct("<HHI6xH")
_MAX_BYTES_PER_SAMPLE = 4


class WavFormatError(ValueError):
    """Raised when a file is not a WAV file this reader understands."""


@dataclass(frozen=True)
class WavInfo:
    """Header fields of a WAV file together with its raw samples."""

    audio_format: int
    num_channels: int
    sample_rate: int
    bits_per_sample: int
    bytes_per_sample: int
    data_size: int
    sample_data: tuple[int, ...] = field(repr=False)

    def num_samples(self) -> int:
        """Number of samples held in the data chunk."""
        return self.data_size // self.bytes_per_sample


def _read_chunk_header(stream: BinaryIO) -> tuple[bytes, int] | None:
    raw = stream.read(_CHUNK_HEADER.size)
    if len(raw) < _CHUNK_HEADER.size:
        return None
    return _CHUNK_HEADER.unpack(raw)


def _decode_samples(raw: bytes, count: int, width: int) -> tuple[int, ...]:
    """Decode little-endian unsigned samples of ``width`` bytes each."""
    padded = np.zeros((count, _MAX_BYTES_PER_SAMPLE), dtype=np.uint8)
    padded[:, :width] = np.frombuffer(raw, dtype=np.uint8).reshape(count, width)
    return tuple(padded.view("<u4").reshape(count).tolist())


def read_wav(path: str | os.PathLike[str]) -> WavInfo:
    """Read the header and the samples of a WAV file.

    Samples are read as unsigned little-endian integers of the file's sample
    width, whatever the channel layout. A data chunk that ends early is
    completed with zero bytes.
    """
    with open(path, "rb") as stream:
        raw = stream.read(_RIFF_HEADER.size)
        if len(raw) < _RIFF_HEADER.size:
            raise WavFormatError(f"{os.fspath(path)}: not a valid WAV file")
        riff_id, _, wave_id = _RIFF_HEADER.unpack(raw)
        if riff_id != b"RIFF" or wave_id != b"WAVE":
            raise WavFormatError(f"{os.fspath(path)}: not a valid WAV file")

        header = _read_chunk_header(stream)
        if header is None or header[0] != b"fmt ":
            raise WavFormatError(f"{os.fspath(path)}: fmt subchunk not found")
        fmt_size = header[1]
        raw = stream.read(_FMT_FIELDS.size)
        if len(raw) < _FMT_FIELDS.size:
            raise WavFormatError(f"{os.fspath(path)}: truncated fmt subchunk")
        audio_format, num_channels, sample_rate, bits_per_sample = _FMT_FIELDS.unpack(raw)
        if fmt_size > _FMT_FIELDS.size:
            stream.seek(fmt_size - _FMT_FIELDS.size, os.SEEK_CUR)

        bytes_per_sample = bits_per_sample // 8
        if not 1 <= bytes_per_sample <= _MAX_BYTES_PER_SAMPLE:
            raise WavFormatError(
                f"{os.fspath(path)}: unsupported sample width of {bits_per_sample} bits"
            )

        while True:
            header = _read_chunk_header(stream)
            if header is None:
                raise WavFormatError(f"{os.fspath(path)}: data subchunk not found")
            chunk_id, chunk_size = header
            if chunk_id == b"data":
                break
            stream.seek(chunk_size, os.SEEK_CUR)

        data_size = chunk_size
        count = data_size // bytes_per_sample
        length = count * bytes_per_sample
        raw = stream.read(length).ljust(length, b"\0")

    return WavInfo(
        audio_format=audio_format,
        num_channels=num_channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        bytes_per_sample=bytes_per_sample,
        data_size=data_size,
        sample_data=_decode_samples(raw, count, bytes_per_sample),
    )