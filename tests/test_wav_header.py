import struct

import numpy as np
import pytest

from beesynth.wav_header import Wave, WaveFormatError, WaveView, is_wav


def make_wav(payload, bits, channels=1, rate=8000, extra=b""):
    fmt = struct.pack(
        "<HHIIHH", 1, channels, rate, rate * channels * bits // 8, channels * bits // 8, bits
    )
    body = (
        b"WAVE"
        + b"fmt "
        + struct.pack("<I", len(fmt))
        + fmt
        + extra
        + b"data"
        + struct.pack("<I", len(payload))
        + payload
    )
    return b"RIFF" + struct.pack("<I", len(body)) + body


SAMPLES16 = [1000, -1000, 32767, -32768, 0, 42]


def test_is_wav_accepts_built_file():
    assert is_wav(make_wav(struct.pack("<6h", *SAMPLES16), 16)) is True


def test_is_wav_rejects_short_buffer():
    assert is_wav(b"RIFF\x00\x00\x00\x00WAVE") is False


def test_is_wav_rejects_wrong_format():
    wav = bytearray(make_wav(struct.pack("<6h", *SAMPLES16), 16))
    wav[8:12] = b"AVI "
    assert is_wav(bytes(wav)) is False


def test_wave_view_rejects_non_wav():
    with pytest.raises(WaveFormatError):
        WaveView(b"\x00" * 64)


def test_header_fields():
    view = WaveView(make_wav(struct.pack("<6h", *SAMPLES16), 16, channels=2, rate=22050))
    header = view.header
    assert header.chunk_id == int.from_bytes(b"RIFF", "little")
    assert header.format == int.from_bytes(b"WAVE", "little")
    assert header.subchunk_id == int.from_bytes(b"fmt ", "little")
    assert header.audio_format == 1
    assert header.num_channels == 2
    assert header.sample_rate == 22050
    assert header.bits_per_sample == 16


def test_lookup_16_bit_samples():
    wave = WaveView(make_wav(struct.pack("<6h", *SAMPLES16), 16)).lookup_samples()
    assert wave.bits == 16
    assert wave.samples.tolist() == SAMPLES16


def test_lookup_8_bit_samples():
    values = [0, 127, 128, 255, 10, 20, 30, 40, 50, 60]
    wave = WaveView(make_wav(bytes(values), 8)).lookup_samples()
    assert wave.bits == 8
    assert wave.samples.tolist() == values


def test_lookup_32_bit_samples():
    values = [2147483647, -2147483648, 0, 5]
    wave = WaveView(make_wav(struct.pack("<4i", *values), 32)).lookup_samples()
    assert wave.bits == 32
    assert wave.samples.tolist() == values


def test_lookup_skips_other_chunks():
    extra = b"LIST" + struct.pack("<I", 6) + b"abcdef"
    wave = WaveView(make_wav(struct.pack("<6h", *SAMPLES16), 16, extra=extra)).lookup_samples()
    assert wave.samples.tolist() == SAMPLES16


def test_unsupported_bits_is_unknown():
    wave = WaveView(make_wav(bytes(12), 24)).lookup_samples()
    assert wave.is_unknown is True


def test_missing_data_chunk_is_unknown():
    fmt = struct.pack("<HHIIHH", 1, 1, 8000, 16000, 2, 16)
    body = b"WAVE" + b"fmt " + struct.pack("<I", 16) + fmt + b"LIST" + struct.pack("<I", 20) + bytes(20)
    wav = b"RIFF" + struct.pack("<I", len(body)) + body
    assert WaveView(wav).lookup_samples().is_unknown is True


def test_to_int16_identity_for_16_bit():
    wave = Wave(16, np.array(SAMPLES16, dtype=np.int16))
    assert wave.to_int16().tolist() == SAMPLES16


def test_to_int16_from_8_bit_midpoint_and_order():
    wave = Wave(8, np.array([0, 50, 127, 200], dtype=np.uint8))
    converted = wave.to_int16().tolist()
    assert converted[2] == 0
    assert converted == sorted(converted)


def test_to_int16_from_32_bit_truncates_toward_zero():
    wave = Wave(32, np.array([5 * 65536, -3 * 65536, -65535], dtype=np.int32))
    assert wave.to_int16().tolist() == [5, -3, 0]


def test_to_int16_unknown_is_empty():
    assert Wave().to_int16().tolist() == []