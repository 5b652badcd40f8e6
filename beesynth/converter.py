"""Conversion of arbitrary audio files to mono PCM wav using FFmpeg, with a cache."""

from __future__ import annotations

import hashlib
import subprocess
import sys
from pathlib import Path

_HASH_SEED = 0x1EE7C0DE
_ENCODERS = {8: "pcm_u8", 16: "pcm_s16le", 24: "pcm_s24le", 32: "pcm_s32le"}


class ConversionError(Exception):
    """FFmpeg did not produce the expected output."""

    def __init__(self, stdout: str, stderr: str) -> None:
        super().__init__(f"Conversion failure:\nStdOut:\n{stdout}\nStdErr:\n{stderr}")
        self.stdout = stdout
        self.stderr = stderr


class AbsentFFmpegError(FileNotFoundError):
    """The FFmpeg executable is missing from the assets folder."""

    def __init__(self) -> None:
        super().__init__("FFmpeg executable not found in ./assets/ffmpeg/ffmpeg.exe")


def content_hash(data: bytes) -> int:
    """Return a 64-bit hash of ``data`` used to name cached files."""
    digest = hashlib.blake2b(
        bytes(data), digest_size=8, key=_HASH_SEED.to_bytes(8, "little")
    ).digest()
    return int.from_bytes(digest, "little")


def encoder_for_bitness(bitness: int) -> str:
    """Return the FFmpeg PCM encoder for the given bit depth."""
    try:
        return _ENCODERS[bitness]
    except KeyError:
        raise ConversionError(
            "", "Invalid bitness, the only supported are 8, 16, 24 and 32"
        ) from None


def _default_assets_folder() -> Path:
    return Path(sys.argv[0]).resolve().parent / "assets"


def convert_to_wav(
    file_path: str | Path,
    bitness: int,
    sample_rate: int,
    assets_folder: str | Path | None = None,
) -> Path:
    """Convert ``file_path`` to a mono wav in the cache and return the cached path."""
    assets = Path(assets_folder) if assets_folder is not None else _default_assets_folder()
    if not assets.exists():
        raise AbsentFFmpegError()

    cache_folder = assets / "cache"
    cache_folder.mkdir(parents=True, exist_ok=True)

    file_path = Path(file_path)
    digest = content_hash(file_path.read_bytes())
    cached_path = cache_folder / f"{digest}_{bitness}_{sample_rate}.wav"
    if cached_path.exists():
        return cached_path

    ffmpeg_path = assets / "ffmpeg" / "ffmpeg.exe"
    if not ffmpeg_path.exists():
        raise AbsentFFmpegError()

    encoder = encoder_for_bitness(bitness)
    process = subprocess.run(
        [
            str(ffmpeg_path),
            "-i", str(file_path),
            "-acodec", encoder,
            "-ac", "1",
            "-ar", str(sample_rate),
            str(cached_path),
        ],
        capture_output=True,
        check=False,
    )

    if not cached_path.exists():
        raise ConversionError(
            process.stdout.decode("utf-8", errors="replace"),
            process.stderr.decode("utf-8", errors="replace"),
        )
    return cached_path