"""
Taxi park domain models. Dataclasses only. No FastAPI, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class Driver:
    name: str


@dataclass(frozen=True)
class Passenger:
    name: str


@dataclass(frozen=True)
class Trip:
    """Un viaje realizado: un conductor, uno o más pasajeros."""
    driver: Driver
    passengers: FrozenSet[Passenger]
    duration: int  # minutos, >= 0
    cost: float
    discount: Optional[float] = None  # None o 0.0 = sin descuento

    @property
    def has_discount(self) -> bool:
        return self.discount is not None and self.discount > 0.0


@dataclass(frozen=True)
class TaxiPark:
    all_drivers: FrozenSet[Driver]
    all_passengers: FrozenSet[Passenger]
    trips: Tuple[Trip, ...]


@dataclass
class ParkReport:
    """Resultado de todas las consultas sobre un parque."""
    fake_drivers: FrozenSet[Driver]
    min_trips: int
    faithful_passengers: FrozenSet[Passenger]
    smart_passengers: FrozenSet[Passenger]
    most_frequent_period: Optional[range]  # range(10k, 10k + 10); None si no hay viajes
    pareto_holds: bool
    driver: Optional[Driver] = None
    frequent_passengers: Optional[FrozenSet[Passenger]] = None  # None si no se pidió conductor
