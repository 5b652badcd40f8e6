"""Records exchanged between filters, and the filter interface."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field


class Position(enum.Enum):
    """Position of the speaker membrane."""

    DOWN = 0
    UP = 1


class FilterType(enum.Enum):
    """Kind of data a filter consumes."""

    AMPLITUDE = "amplitude"
    FREQUENCY = "frequency"


class MismatchedDataError(TypeError):
    """Raised when a filter receives data of a kind it cannot process."""


@dataclass
class WaveData:
    """Mono amplitude samples in [-1.0, 1.0] with their sample rate in Hz."""

    samples: list[float] = field(default_factory=list)
    sample_rate: int = 0

    def is_empty(self) -> bool:
        return len(self.samples) == 0


@dataclass
class FreqRecord:
    """A tone of ``freq`` Hz lasting ``duration`` nanoseconds; zero means a pause."""

    freq: float = 0.0
    duration: int = 0


@dataclass
class PositionRecord:
    """A membrane position held for ``duration`` nanoseconds."""

    position: Position = Position.DOWN
    duration: int = 0


@dataclass
class FrequencyData:
    """One list of frequency records per playback channel."""

    channels: list[list[FreqRecord]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.channels


@dataclass
class PositionData:
    """A sequence of membrane positions."""

    records: list[PositionRecord] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.records


Data = WaveData | FrequencyData | PositionData


class Filter(abc.ABC):
    """A processing step turning one kind of data into another."""

    @abc.abstractmethod
    def filter_type(self) -> FilterType:
        """Return the kind of data this filter consumes."""

    @abc.abstractmethod
    def filter(self, data: Data) -> Data:
        """Process ``data``; raise MismatchedDataError on the wrong kind."""