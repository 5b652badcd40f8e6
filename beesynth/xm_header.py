"""Parsing of FastTracker 2 extended module (XM) headers and pattern cells."""

from __future__ import annotations

import struct
from dataclasses import dataclass

EXTENDED_MODULE_SIG = b"Extended Module:"
TRACKER_NAME_SIG = b"FastTracker v2.00   "

_XM_HEADER = struct.Struct("<17s20sB20sHIHHHHHHHH256s")
_PATTERN_HEADER = struct.Struct("<IBHH")

_TYPE_MASK = 0b1000_0000
_HAS_NOTE = 0b0000_0001
_HAS_INSTRUMENT = 0b0000_0010
_HAS_VOLUME = 0b0000_0100
_HAS_EFFECT_TYPE = 0b0000_1000
_HAS_EFFECT_PARAMETER = 0b0001_0000
_FIXED_CELL_SIZE = 5

# Index 0 is "no note", then C1 .. B8 in semitone steps.
NOTES: tuple[float, ...] = (
    0.0,
    32.70, 34.65, 36.71, 38.89, 41.20, 43.65, 46.25, 49.00, 51.91, 55.00, 58.27, 61.74,
    65.41, 69.30, 73.42, 77.78, 82.41, 87.31, 92.50, 98.00, 103.83, 110.00, 116.54, 123.47,
    130.81, 138.59, 146.83, 155.56, 164.81, 174.61, 185.00, 196.00, 207.65, 220.00, 233.08,
    246.94,
    261.63, 277.18, 293.66, 311.13, 329.63, 349.23, 369.99, 392.00, 415.30, 440.00, 466.16,
    493.88,
    523.25, 554.37, 587.33, 622.25, 659.25, 698.46, 739.99, 783.99, 830.61, 880.00, 932.33,
    987.77,
    1046.50, 1108.73, 1174.66, 1244.51, 1318.51, 1396.91, 1479.98, 1567.98, 1661.22, 1760.00,
    1864.66, 1975.53,
    2093.00, 2217.46, 2349.32, 2489.02, 2637.02, 2793.83, 2959.96, 3135.96, 3322.44, 3520.00,
    3729.31, 3951.07,
    4186.01, 4434.92, 4698.63, 4978.03, 5274.04, 5587.65, 5919.91, 6271.93, 6644.88, 7040.00,
    7458.62, 7902.13,
)


class XmFormatError(ValueError):
    """Raised when data is not a usable XM module."""


@dataclass
class PatternData:
    """One decoded pattern cell."""

    note_freq: float | None = None
    note: int | None = None
    instrument: int = 0
    volume: int = 0
    effect: int = 0
    effect_param: int = 0


@dataclass(frozen=True)
class PatternHeader:
    """Header of one pattern located at ``offset`` within the module."""

    offset: int
    pattern_header_length: int
    packing_type: int
    number_of_rows_in_pattern: int
    packed_pattern_data_size: int

    @property
    def first_pattern(self) -> int:
        """Offset of the first pattern cell."""
        return self.offset + self.pattern_header_length


def is_xm(raw: bytes) -> bool:
    """Tell whether ``raw`` starts with a FastTracker 2 module header."""
    raw = bytes(raw)
    if len(raw) < _XM_HEADER.size:
        return False
    id_text = raw[:17]
    tracker_name = raw[38:58]
    return id_text.startswith(EXTENDED_MODULE_SIG) and tracker_name == TRACKER_NAME_SIG


def _byte_at(data: bytes, position: int) -> int:
    if position >= len(data):
        raise XmFormatError(f"Pattern data is truncated at offset {position}")
    return data[position]


def _note_in_table(note: int) -> int | None:
    return note if note < len(NOTES) else None


def decode_pattern(data: bytes, offset: int) -> tuple[PatternData, int]:
    """Decode the cell at ``offset``; return it with the offset of the next cell."""
    data = bytes(data)
    first = _byte_at(data, offset)

    if first & _TYPE_MASK == 0:
        if offset + _FIXED_CELL_SIZE > len(data):
            raise XmFormatError(f"Pattern data is truncated at offset {offset}")
        note_byte, instrument, volume, effect, effect_param = data[offset : offset + _FIXED_CELL_SIZE]
        note = _note_in_table(note_byte)
        cell = PatternData(
            note_freq=NOTES[note] if note is not None else None,
            note=note,
            instrument=instrument,
            volume=volume,
            effect=effect,
            effect_param=effect_param,
        )
        return cell, offset + _FIXED_CELL_SIZE

    mask = first
    if mask & _HAS_NOTE:
        note = _note_in_table(_byte_at(data, offset + 1))
    else:
        note = 0

    def field(flag: int, shift: int) -> int:
        return _byte_at(data, offset + shift) if mask & flag else 0

    cell = PatternData(
        note_freq=NOTES[note] if note is not None else None,
        note=note,
        instrument=field(_HAS_INSTRUMENT, 2),
        volume=field(_HAS_VOLUME, 3),
        effect=field(_HAS_EFFECT_TYPE, 4),
        effect_param=field(_HAS_EFFECT_PARAMETER, 5),
    )
    # The type bit counts as the mask byte itself.
    return cell, offset + mask.bit_count()


@dataclass(frozen=True)
class XmHeader:
    """The fixed header of an XM module together with the module bytes."""

    id_text: bytes
    module_name: bytes
    must_be_0x1a: int
    tracker_name: bytes
    version_number: int
    header_size: int
    song_length: int
    restart_position: int
    number_of_channels: int
    number_of_patterns: int
    number_of_instruments: int
    flags: int
    default_tempo: int
    default_bpm: int
    pattern_order_table: tuple[int, ...]
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> XmHeader:
        """Parse the header at the start of ``data``."""
        data = bytes(data)
        if len(data) < _XM_HEADER.size:
            raise XmFormatError("The data is too short for an XM header")
        fields = _XM_HEADER.unpack_from(data)
        *scalars, order_table = fields
        return cls(*scalars, tuple(order_table), data)

    def pattern_headers(self) -> list[PatternHeader]:
        """Return the headers of all patterns, in file order."""
        headers = []
        offset = _XM_HEADER.size
        for _ in range(self.number_of_patterns):
            if offset + _PATTERN_HEADER.size > len(self.data):
                raise XmFormatError(f"Pattern header is truncated at offset {offset}")
            length, packing, rows, packed_size = _PATTERN_HEADER.unpack_from(self.data, offset)
            headers.append(PatternHeader(offset, length, packing, rows, packed_size))
            offset += length + packed_size
        return headers