"""Prepare audio for PC-speaker playback: WAV reading, filters, baking, frequency extraction, ffmpeg conversion and XM headers."""

__version__ = "0.1.0"