"""Reading RIFF/WAVE audio files into a format description and sample bytes."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import Union

_CHUNK_HEADER = struct.Struct("<4si")
_WAVE_FORMAT = struct.Struct("<HHIIHHH")


class WaveFormatError(ValueError):
    """Raised when data is not a readable RIFF/WAVE stream."""


@dataclass
class WaveFormat:
    """The fields of a wave format chunk."""

    format_tag: int = 0
    channels: int = 0
    samples_per_sec: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    cb_size: int = 0

    SIZE = _WAVE_FORMAT.size

    @classmethod
    def from_bytes(cls, body: bytes) -> WaveFormat:
        """Decode a format chunk body, zero-filling fields it leaves out."""
        if len(body) > cls.SIZE:
            raise WaveFormatError(
                f"format chunk of {len(body)} bytes exceeds {cls.SIZE} bytes"
            )
        return cls(*_WAVE_FORMAT.unpack(body.ljust(cls.SIZE, b"\0")))


@dataclass
class SoundData:
    """A wave format and the raw sample data of its data chunk."""

    wfex: WaveFormat = field(default_factory=WaveFormat)
    buffer: bytes = b""

    @property
    def buffer_size(self) -> int:
        return len(self.buffer)


def _read_chunk_header(data: bytes, offset: int) -> tuple[bytes, int, int]:
    if offset + _CHUNK_HEADER.size > len(data):
        raise WaveFormatError("unexpected end of data while reading a chunk header")
    chunk_id, size = _CHUNK_HEADER.unpack_from(data, offset)
    if size < 0:
        raise WaveFormatError(f"chunk {chunk_id!r} has a negative size")
    return chunk_id, size, offset + _CHUNK_HEADER.size


def _read_body(data: bytes, offset: int, size: int) -> bytes:
    body = data[offset:offset + size]
    if len(body) < size:
        raise WaveFormatError("unexpected end of data while reading a chunk body")
    return body


def parse_wave(data: bytes) -> SoundData:
    """Parse a RIFF/WAVE stream held in memory."""
    data = bytes(data)
    riff_id, _, offset = _read_chunk_header(data, 0)
    if riff_id != b"RIFF":
        raise WaveFormatError("data does not start with a RIFF header")
    riff_type = data[offset:offset + 4]
    if riff_type != b"WAVE":
        raise WaveFormatError("RIFF type is not WAVE")
    offset += 4

    fmt_id, fmt_size, offset = _read_chunk_header(data, offset)
    if fmt_id != b"fmt ":
        raise WaveFormatError("the first chunk is not a format chunk")
    if fmt_size > WaveFormat.SIZE:
        raise WaveFormatError(
            f"format chunk of {fmt_size} bytes exceeds {WaveFormat.SIZE} bytes"
        )
    wave_format = WaveFormat.from_bytes(_read_body(data, offset, fmt_size))
    offset += fmt_size

    chunk_id, size, offset = _read_chunk_header(data, offset)
    while chunk_id != b"data":
        offset += size
        chunk_id, size, offset = _read_chunk_header(data, offset)

    return SoundData(wfex=wave_format, buffer=_read_body(data, offset, size))


def load_wave(filename: Union[str, "os.PathLike[str]"]) -> SoundData:
    """Read and parse a .wav file."""
    with open(filename, "rb") as file:
        return parse_wave(file.read())