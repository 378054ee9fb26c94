from datetime import date

from congestion.errors import ConfigError
from congestion.vehicles import VehicleCategory

SATURDAY = 5


class ExemptionPolicy:
    """Decides whether a vehicle category or a date is toll free.

    Date exemptions are plain data keyed by year::

        {2013: {"months": [7], "days": ["01-01", "12-24"]}}

    A year missing from the table only gets the weekend rule.
    """

    def __init__(self, exempt_vehicles=(), exempt_dates=None, weekend_exempt=True):
        self.weekend_exempt = weekend_exempt
        self.exempt_vehicles = frozenset(self._vehicle(tag) for tag in exempt_vehicles)

        months, days = set(), set()
        for year, rules in (exempt_dates or {}).items():
            try:
                year = int(year)
                for month in rules.get("months", ()):
                    months.add((year, int(month)))
                for day in rules.get("days", ()):
                    month, dom = map(int, day.split("-")) if isinstance(day, str) else day
                    # validates the day actually exists in that year
                    date(year, month, dom)
                    days.add((year, month, dom))
            except (AttributeError, TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid exempt date rule for {year!r}: {rules!r}") from exc
        self._months = frozenset(months)
        self._days = frozenset(days)

    @staticmethod
    def _vehicle(tag):
        category = VehicleCategory.parse(tag)
        if category is None:
            raise ConfigError(f"Unknown exempt vehicle category: {tag!r}")
        return category

    @classmethod
    def from_policy(cls, policy):
        return cls(
            exempt_vehicles=policy.get("exempt_vehicles", ()),
            exempt_dates=policy.get("exempt_dates"),
            weekend_exempt=policy.get("weekend_exempt", True),
        )

    def is_exempt_vehicle(self, category):
        return VehicleCategory.parse(category) in self.exempt_vehicles

    def is_exempt_date(self, day):
        """True for weekends and configured holidays; accepts date or datetime."""
        if self.weekend_exempt and day.weekday() >= SATURDAY:
            return True
        if (day.year, day.month) in self._months:
            return True
        return (day.year, day.month, day.day) in self._days
