"""Parsing of RIFF/WAVE headers and lookup of the PCM data chunk."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

import numpy as np

RIFF_SIGNATURE = 0x46464952  # 'RIFF'
WAVE_SIGNATURE = 0x45564157  # 'WAVE'
FMT_SIGNATURE = 0x20746D66  # 'fmt '
DATA_SIGNATURE = 0x61746164  # 'data'

_HEADER = struct.Struct("<IIIIIHHIIHH")
_SUBCHUNK = struct.Struct("<II")
_FIRST_SUBCHUNK_OFFSET = 12

# bits per sample -> (on-disk dtype, native dtype)
_SAMPLE_TYPES = {
    8: (np.dtype("u1"), np.dtype(np.uint8)),
    16: (np.dtype("<i2"), np.dtype(np.int16)),
    32: (np.dtype("<i4"), np.dtype(np.int32)),
}


class WaveFormatError(ValueError):
    """Raised when data is not a usable wav file."""


@dataclass(frozen=True)
class WavHeader:
    """The fixed 36-byte beginning of a wav file."""

    chunk_id: int
    chunk_size: int
    format: int
    subchunk_id: int
    subchunk_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int


def _parse_header(buf: bytes) -> WavHeader:
    return WavHeader(*_HEADER.unpack_from(buf))


def is_wav(buf: bytes) -> bool:
    """Tell whether ``buf`` starts with a RIFF/WAVE header."""
    if len(buf) < _HEADER.size:
        return False
    header = _parse_header(buf)
    return header.chunk_id == RIFF_SIGNATURE and header.format == WAVE_SIGNATURE


@dataclass(frozen=True, eq=False)
class Wave:
    """Raw PCM samples of the data chunk; ``bits`` is None when unknown."""

    bits: int | None = None
    samples: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int16))

    @property
    def is_unknown(self) -> bool:
        return self.bits is None

    def to_int16(self) -> np.ndarray:
        """Convert the samples to signed 16-bit values with a small amplitude loss."""
        if self.bits == 8:
            # 16-bit arithmetic wraps on the topmost value, as the cast does here.
            return ((self.samples.astype(np.int32) - 127) * 256).astype(np.int16)
        if self.bits == 16:
            return self.samples.astype(np.int16)
        if self.bits == 32:
            return np.trunc(self.samples.astype(np.float64) / 65536).astype(np.int16)
        return np.empty(0, dtype=np.int16)


class WaveView:
    """A view over the bytes of a wav file."""

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if not is_wav(data):
            raise WaveFormatError("It's not a known wav-file.")
        self._data = data
        self.header = _parse_header(data)

    def lookup_samples(self) -> Wave:
        """Find the data chunk and return its samples."""
        data = self._data
        end_of_file = self.header.chunk_size - 8
        offset = _FIRST_SUBCHUNK_OFFSET
        chunk_id, chunk_size = _SUBCHUNK.unpack_from(data, offset)
        while chunk_id != DATA_SIGNATURE:
            offset += _SUBCHUNK.size + chunk_size
            if offset >= end_of_file or offset + _SUBCHUNK.size > len(data):
                return Wave()
            chunk_id, chunk_size = _SUBCHUNK.unpack_from(data, offset)

        types = _SAMPLE_TYPES.get(self.header.bits_per_sample)
        if types is None:
            return Wave()
        disk_type, native_type = types
        start = offset + _SUBCHUNK.size
        available = min(chunk_size, len(data) - start)
        count = available // disk_type.itemsize
        samples = np.frombuffer(data, dtype=disk_type, count=count, offset=start)
        return Wave(self.header.bits_per_sample, samples.astype(native_type))