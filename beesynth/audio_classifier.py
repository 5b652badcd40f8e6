"""Recognition of audio file types by their leading bytes."""

from __future__ import annotations

import enum

from beesynth.wav_header import is_wav

SYNTH_TAG = b"#!/bin/beesynth"


class AudioType(enum.Enum):
    UNKNOWN = "unknown"
    MP3 = "mp3"
    WAV = "wav"
    SYNTH = "synth"


def _is_mp3(buf: bytes) -> bool:
    return buf[:3] == b"ID3" or buf[:2] == b"\xff\xfb"


def _is_synth(buf: bytes) -> bool:
    return buf.startswith(SYNTH_TAG)


def classify(buf: bytes) -> AudioType:
    """Classify the contents of a file."""
    buf = bytes(buf)
    if is_wav(buf):
        return AudioType.WAV
    if _is_mp3(buf):
        return AudioType.MP3
    if _is_synth(buf):
        return AudioType.SYNTH
    return AudioType.UNKNOWN