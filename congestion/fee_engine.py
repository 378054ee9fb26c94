"""Daily congestion tax: one charge per rolling hour, capped per day."""
import logging
from datetime import datetime, timedelta
from typing import NamedTuple, Tuple

from congestion.errors import (
    CongestionTaxError,
    ComputationError,
    ConfigError,
    InvalidInputError,
)
from congestion.exemptions import ExemptionPolicy
from congestion.policy import POLICY
from congestion.schedule import FeeScheduleTable
from congestion.vehicles import resolve_category

logger = logging.getLogger(__name__)


class ChargingWindow(NamedTuple):
    """Crossings within window_minutes of the anchor; charged once at the peak fee."""

    anchor: datetime
    crossings: Tuple[datetime, ...]
    fee: int

    def add(self, timestamp, fee):
        return self._replace(
            crossings=self.crossings + (timestamp,),
            fee=max(self.fee, fee),
        )


class DailyTax:
    """Encapsulates the computed tax for one vehicle on one day."""

    def __init__(self, category, windows=(), daily_cap=60):
        self.category = category
        self.windows = tuple(windows)
        self.daily_cap = daily_cap
        self.uncapped_total = sum(w.fee for w in self.windows)
        self.total = min(self.uncapped_total, daily_cap)
        self.capped = self.uncapped_total > daily_cap

    def __repr__(self):
        return (
            f"DailyTax(category={self.category}, total={self.total}, "
            f"windows={len(self.windows)})"
        )


class IntervalAggregator:
    def __init__(self, schedule, exemptions, daily_cap=60, window_minutes=60):
        if isinstance(daily_cap, bool) or not isinstance(daily_cap, int) or daily_cap < 0:
            raise ConfigError(f"Daily cap must be a non-negative integer: {daily_cap!r}")
        if not isinstance(window_minutes, int) or window_minutes <= 0:
            raise ConfigError(f"Window length must be a positive integer: {window_minutes!r}")
        self.schedule = schedule
        self.exemptions = exemptions
        self.daily_cap = daily_cap
        self.window = timedelta(minutes=window_minutes)

    def crossing_fee(self, category, timestamp):
        """Fee for a single crossing, before windowing and the daily cap."""
        if self.exemptions.is_exempt_vehicle(category) or self.exemptions.is_exempt_date(timestamp):
            return 0
        return self.schedule.fee_at(timestamp)

    def compute(self, vehicle, timestamps):
        """
        Group the crossings of one day into charging windows and total them.

        A window is anchored at its first crossing and takes every later
        crossing at most window_minutes after the anchor (inclusive). Each
        window is charged once at the highest fee seen inside it.
        """
        category, crossings = self._validate(vehicle, timestamps)

        if self.exemptions.is_exempt_vehicle(category):
            logger.debug("Vehicle category %s is exempt", category.value)
            return DailyTax(category, daily_cap=self.daily_cap)

        try:
            crossings = sorted(ts.replace(second=0, microsecond=0) for ts in crossings)
            if len({ts.date() for ts in crossings}) > 1:
                logger.warning(
                    "Crossings span several dates (%s to %s); treating them as one day",
                    crossings[0].date(), crossings[-1].date(),
                )

            windows = []
            for ts in crossings:
                fee = self.crossing_fee(category, ts)
                if windows and ts - windows[-1].anchor <= self.window:
                    windows[-1] = windows[-1].add(ts, fee)
                else:
                    logger.debug("Opening charging window at %s", ts.isoformat())
                    windows.append(ChargingWindow(ts, (ts,), fee))

            result = DailyTax(category, windows, daily_cap=self.daily_cap)
        except CongestionTaxError:
            raise
        except Exception as exc:
            logger.exception("Congestion tax computation failed for %s", category.value)
            raise ComputationError(
                f"Error calculating tax: {exc}",
                details={"category": category.value, "crossings": len(crossings)},
            ) from exc

        logger.info(
            "%s: %d crossings in %d windows, tax %d",
            category.value, len(crossings), len(result.windows), result.total,
        )
        return result

    def daily_tax(self, vehicle, timestamps):
        return self.compute(vehicle, timestamps).total

    @staticmethod
    def _validate(vehicle, timestamps):
        if vehicle is None:
            raise InvalidInputError("Vehicle is required")
        try:
            category = resolve_category(vehicle)
        except CongestionTaxError:
            raise
        except Exception as exc:
            logger.exception("Vehicle category lookup failed for %r", vehicle)
            raise ComputationError(f"Could not read vehicle category: {exc}") from exc
        if category is None:
            raise InvalidInputError(f"Unknown vehicle category: {vehicle!r}")

        if timestamps is None or isinstance(timestamps, (str, bytes)):
            raise InvalidInputError("Crossing timestamps are required")
        try:
            crossings = list(timestamps)
        except TypeError as exc:
            raise InvalidInputError(f"Crossing timestamps must be a sequence: {timestamps!r}") from exc
        if not crossings:
            raise InvalidInputError("At least one crossing timestamp is required")
        for ts in crossings:
            if not isinstance(ts, datetime):
                raise InvalidInputError(f"Not a timestamp: {ts!r}")
        return category, crossings


def build_aggregator(policy=POLICY):
    return IntervalAggregator(
        FeeScheduleTable.from_policy(policy),
        ExemptionPolicy.from_policy(policy),
        daily_cap=policy.get("daily_cap", 60),
        window_minutes=policy.get("window_minutes", 60),
    )


DEFAULT_AGGREGATOR = build_aggregator()


def compute_daily_tax(vehicle, timestamps, policy=None):
    """Return the DailyTax breakdown, using the default policy unless one is given."""
    aggregator = DEFAULT_AGGREGATOR if policy is None else build_aggregator(policy)
    return aggregator.compute(vehicle, timestamps)


def daily_tax(vehicle, timestamps, policy=None):
    return compute_daily_tax(vehicle, timestamps, policy).total
