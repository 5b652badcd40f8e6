# beesynth

beesynth is a library that prepares audio for a one-bit PC speaker. It
reads PCM WAV files (and converts other formats through an ffmpeg
executable), turns the samples into amplitudes, runs them through
filters and produces one of two playable forms:

* **positions** – a sequence of speaker-cone Up/Down states, each with
  a duration in nanoseconds;
* **frequencies** – per-channel tone records, each a frequency in Hz and
  a duration in nanoseconds (a frequency of zero is a pause).

It also reads the headers and pattern cells of FastTracker 2 (XM)
modules.

## Installation

Install the `beesynth` distribution with your usual Python package
installer. It needs Python 3.10 or newer and depends on numpy. The
`test` extra pulls in pytest.

## Modules

| Module | What it holds |
| --- | --- |
| `beesynth.filter` | Shared data types: `WaveData`, `FreqRecord`, `PositionRecord`, `FrequencyData`, `PositionData`, the `Position` and `FilterType` enums, the `Filter` base class and `MismatchedDataError`. |
| `beesynth.wav_header` | `is_wav`, `WavHeader`, `WaveView` and `Wave`: checks a RIFF/WAVE header and finds the `data` chunk. |
| `beesynth.wav_extractor` | `wave_view_to_data` turns 8, 16 and 32-bit PCM into amplitudes in `[-1.0, 1.0]`. |
| `beesynth.audio_classifier` | `classify` returns an `AudioType`: `WAV`, `MP3`, `SYNTH` or `UNKNOWN`. |
| `beesynth.freq_filters` | `LowPass` and `HighPass` first-order RC filters. |
| `beesynth.freq_modulation` | `FreqModulation` modulates a carrier with the amplitude signal. |
| `beesynth.bakery` | `Bakery` bakes amplitudes into Up/Down positions. |
| `beesynth.freq_extractor` | `FreqExtractor` runs a sliding FFT and keeps the strongest peaks as frequency channels; `find_peaks` finds local maxima. |
| `beesynth.converter` | `convert_to_wav` converts a file to mono PCM wav with ffmpeg and caches the result. |
| `beesynth.xm_header` | `is_xm`, `XmHeader`, `PatternHeader`, `PatternData`, `decode_pattern` and the `NOTES` frequency table. |

## Reading a WAV file

```python
from pathlib import Path

from beesynth.wav_header import WaveView
from beesynth.wav_extractor import wave_view_to_data

view = WaveView(Path("music.wav").read_bytes())
amplitudes = wave_view_to_data(view)   # WaveData
print(view.header.sample_rate, len(amplitudes.samples))
```

`WaveView` raises `WaveFormatError` when the bytes do not start with a
RIFF/WAVE header. `wave_view_to_data` keeps only the first channel of a
multi-channel file. 8-bit samples are mapped with `(s - 127) / 127`,
16-bit with `s / 32767` and 32-bit with `s / 2147483647`, all clipped to
`[-1.0, 1.0]`. Other bit depths give an empty `WaveData`. The sample
rate is kept in 16 bits.

## Filters

Every filter has `filter_type()` and `filter(data)`; handing a filter
data of the wrong kind raises `MismatchedDataError`.

```python
from beesynth.freq_filters import LowPass, HighPass
from beesynth.bakery import Bakery, Strategy
from beesynth.freq_extractor import FreqExtractor

rate = amplitudes.sample_rate
smoothed = LowPass(rate, 4000.0).filter(amplitudes)     # WaveData
cleaned = HighPass(rate, 300.0).filter(smoothed)        # WaveData

positions = Bakery(Strategy.DIFFERENTIAL, 5).filter(cleaned)   # PositionData

extractor = FreqExtractor(100, 3000, sampling_size=4096, step_by=32,
                          sample_rate=rate, number_of_peaks=2)
tones = extractor.filter(amplitudes)                    # FrequencyData
```

* `LowPass` / `HighPass` take the sample rate and the cut-off frequency;
  `apply(samples)` returns the filtered list directly.
* `FreqModulation(carrier_freq=0.0, carrier_amplitude=1.0,
  deviation_freq=0.0005)` returns a modulated `WaveData`;
  `modulate(samples)` returns the list.
* `Bakery(Strategy.SIMPLE)` gives Up for samples above zero and Down
  otherwise. `Bakery(Strategy.DIFFERENTIAL, percentage)` starts from the
  sign of the first sample, then switches when the current sample, as a
  percentage of the previous one, exceeds the threshold (Up if the
  sample rose, Down if it fell); otherwise the last position is held.
  Consecutive equal positions are merged, and each sample lasts
  `1_000_000_000 // sample_rate` nanoseconds.
* `FreqExtractor` slides a window of `sampling_size` samples by
  `step_by`, keeps the FFT bins between the lower and upper bounds (the
  whole lower half when a bound is `None`), converts them to decibels and
  assigns the most prominent peaks to channels, one channel per peak.
  Each step lasts `1_000_000_000 * step_by // sample_rate` nanoseconds.
  A channel's last record is extended instead of a new one being added
  when the new frequency is below 5 % of the last one. Fewer samples than
  one window raise `ValueError`.

## Converting other formats

```python
from beesynth.converter import convert_to_wav

wav_path = convert_to_wav("song.mp3", 16, 22050, assets_folder="assets")
```

The converter expects `assets/ffmpeg/ffmpeg.exe` and writes into
`assets/cache/`, creating it when needed. The cached file is named
`<hash>_<bitness>_<sample_rate>.wav`, where the hash (`content_hash`) is
taken over the input file's bytes, so a second call with the same input
returns the cached file without running ffmpeg. Without an
`assets_folder` the folder next to the running script is used.
Supported bit depths are 8, 16, 24 and 32 (`encoder_for_bitness`).
A missing assets folder or ffmpeg raises `AbsentFFmpegError`; an
unsupported bit depth or an ffmpeg run that leaves no output raises
`ConversionError`, which carries ffmpeg's `stdout` and `stderr`.

## XM modules

```python
from beesynth.xm_header import XmHeader, is_xm, decode_pattern

data = Path("tune.xm").read_bytes()
if is_xm(data):
    xm = XmHeader.from_bytes(data)
    for header in xm.pattern_headers():
        cell, next_offset = decode_pattern(data, header.first_pattern)
        print(cell.note, cell.note_freq)
```

`decode_pattern` handles both fixed five-byte cells and packed cells
and returns the decoded `PatternData` with the offset of the next cell.
Truncated data raises `XmFormatError`.

## What this package does not do

beesynth only prepares data. It does not drive a speaker or any other
sound device, has no command-line program, does not parse option
strings, and does not play XM modules. `classify` recognises synth
listings by their `#!/bin/beesynth` first line, but the package has no
parser for their contents and no matching of frequencies to notes.