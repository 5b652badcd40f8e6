"""Baking of amplitude samples into speaker up/down positions."""

from __future__ import annotations

import enum
import math

from beesynth.filter import (
    Data,
    Filter,
    FilterType,
    MismatchedDataError,
    Position,
    PositionData,
    PositionRecord,
    WaveData,
)

NS_IN_SEC = 1_000_000_000


class Strategy(enum.Enum):
    SIMPLE = "simple"  # Up if the sample is > 0, Down otherwise
    DIFFERENTIAL = "differential"  # Switch when the change exceeds a percentage


def _percent_ratio(numerator: float, denominator: float) -> float:
    """Compute numerator * 100 / denominator with IEEE semantics for zero."""
    scaled = numerator * 100.0
    if denominator == 0.0:
        if scaled == 0.0 or math.isnan(scaled):
            return math.nan
        return math.copysign(math.inf, scaled) * math.copysign(1.0, denominator)
    return scaled / denominator


def _extend(records: list[PositionRecord], position: Position, duration: int) -> None:
    if records and records[-1].position == position:
        records[-1].duration += duration
    else:
        records.append(PositionRecord(position, duration))


class Bakery(Filter):
    """Turns amplitude samples into a sequence of membrane positions."""

    def __init__(self, strategy: Strategy = Strategy.DIFFERENTIAL, percentage: int = 5) -> None:
        if not 0 <= percentage <= 255:
            raise ValueError(f"Percentage must be within 0..255, got {percentage}")
        self.strategy = strategy
        self.percentage = percentage

    def filter_type(self) -> FilterType:
        return FilterType.AMPLITUDE

    def filter(self, data: Data) -> PositionData:
        if not isinstance(data, WaveData):
            raise MismatchedDataError("The bakery accepts amplitude data only")
        if data.sample_rate <= 0:
            raise ValueError("Sample rate must be positive")

        sample_duration = NS_IN_SEC // data.sample_rate
        records: list[PositionRecord] = []

        if self.strategy is Strategy.SIMPLE:
            for sample in data.samples:
                position = Position.UP if sample > 0.0 else Position.DOWN
                _extend(records, position, sample_duration)
            return PositionData(records)

        previous = 0.0
        for sample in data.samples:
            if records:
                diff = sample - previous
                if _percent_ratio(previous + diff, previous) > self.percentage:
                    position = Position.UP if diff > 0.0 else Position.DOWN
                    _extend(records, position, sample_duration)
                else:
                    records[-1].duration += sample_duration
            else:
                position = Position.UP if sample > 0.0 else Position.DOWN
                records.append(PositionRecord(position, sample_duration))
            previous = sample
        return PositionData(records)