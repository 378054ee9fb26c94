from abc import ABC, abstractmethod
from enum import Enum


class VehicleCategory(Enum):
    CAR = "Car"
    MOTORCYCLE = "Motorcycle"
    TRACTOR = "Tractor"
    EMERGENCY = "Emergency"
    DIPLOMAT = "Diplomat"
    FOREIGN = "Foreign"
    MILITARY = "Military"
    BUS = "Bus"

    @classmethod
    def parse(cls, tag):
        """Return the member for a tag (value or name, any case), or None."""
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            return None
        key = tag.strip().upper()
        if key == "ORDINARY":
            return cls.CAR
        for member in cls:
            if key in (member.name, member.value.upper()):
                return member
        return None


class VehicleCategoryProvider(ABC):
    """Anything that can report the category tag of a vehicle."""

    @abstractmethod
    def get_vehicle_category(self):
        """Return a VehicleCategory or its tag string."""


class Vehicle(VehicleCategoryProvider):
    def __init__(self, tag="Car"):
        self.tag = tag

    def get_vehicle_category(self):
        return self.tag

    def __repr__(self):
        return f"Vehicle({self.tag!r})"


def resolve_category(vehicle):
    """Accept a provider, a VehicleCategory or a tag string."""
    if isinstance(vehicle, VehicleCategoryProvider):
        vehicle = vehicle.get_vehicle_category()
    return VehicleCategory.parse(vehicle)
