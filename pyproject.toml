[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beesynth"
version = "0.1.0"
description = "Prepare audio for one-bit PC-speaker playback: WAV reading, RC filters, FM, baking into speaker positions, FFT frequency extraction and XM header parsing."
requires-python = ">=3.10"
keywords = [
    "pc-speaker",
    "beeper",
    "wav",
    "audio",
    "fft",
    "ffmpeg",
    "xm",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["beesynth"]

[tool.hatch.build.targets.sdist]
include = ["beesynth", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
