"""Vehicles: callers start and stop them without knowing how."""

from abc import ABC, abstractmethod


class Vehicle(ABC):
    """Abstract vehicle interface."""

    @abstractmethod
    def start(self) -> str:
        """Start the vehicle. Returns a description of what happened."""
        pass

    @abstractmethod
    def stop(self) -> str:
        """Stop the vehicle. Returns a description of what happened."""
        pass

    def fuel_status(self) -> str:
        """Report fuel level. Same for every vehicle."""
        return "Fuel level: OK"


class Car(Vehicle):
    """Car started with a key."""

    def start(self) -> str:
        return "Car started with key ignition."

    def stop(self) -> str:
        return "Car stopped safely."


class ElectricScooter(Vehicle):
    """Scooter started with a power button."""

    def start(self) -> str:
        return "Scooter started with a power button."

    def stop(self) -> str:
        return "Scooter powered off."


VEHICLE_TYPES: dict[str, type[Vehicle]] = {
    "car": Car,
    "scooter": ElectricScooter,
}
