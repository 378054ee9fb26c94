import bisect
from datetime import time
from typing import NamedTuple

from congestion.errors import ConfigError


class FeeBand(NamedTuple):
    """Time-of-day interval [start, end] (both inclusive) and its fee."""

    start: time
    end: time
    fee: int


def parse_clock(text):
    """Parse "HH:MM" into a time, raising ConfigError on bad input."""
    try:
        hour, minute = map(int, text.split(":"))
        return time(hour, minute)
    except (AttributeError, TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid clock value: {text!r}") from exc


def _to_band(raw):
    if isinstance(raw, FeeBand):
        return raw
    try:
        start, end, fee = raw["start"], raw["end"], raw["fee"]
    except (KeyError, TypeError) as exc:
        raise ConfigError(f"Fee band needs start, end and fee: {raw!r}") from exc
    if not isinstance(start, time):
        start = parse_clock(start)
    if not isinstance(end, time):
        end = parse_clock(end)
    return FeeBand(start, end, fee)


class FeeScheduleTable:
    """Maps a time of day to the fee of the band containing it."""

    def __init__(self, bands):
        bands = sorted((_to_band(b) for b in bands), key=lambda b: b.start)

        for band in bands:
            if isinstance(band.fee, bool) or not isinstance(band.fee, int):
                raise ConfigError(f"Fee must be an integer: {band!r}")
            if band.fee < 0:
                raise ConfigError(f"Fee must not be negative: {band!r}")
            if band.start > band.end:
                raise ConfigError(f"Band starts after it ends: {band!r}")

        for prev, cur in zip(bands, bands[1:]):
            if cur.start <= prev.end:
                raise ConfigError(
                    f"Fee bands overlap: {prev.start:%H:%M}-{prev.end:%H:%M} "
                    f"and {cur.start:%H:%M}-{cur.end:%H:%M}",
                    details={"first": prev, "second": cur},
                )

        self.bands = tuple(bands)
        self._starts = [b.start for b in self.bands]

    @classmethod
    def from_policy(cls, policy):
        return cls(policy["fee_bands"])

    def fee_at(self, timestamp):
        """Fee for the hour:minute of timestamp; 0 outside every band."""
        clock = time(timestamp.hour, timestamp.minute)
        idx = bisect.bisect_right(self._starts, clock) - 1
        if idx < 0:
            return 0
        band = self.bands[idx]
        return band.fee if clock <= band.end else 0
