import pytest

from taxipark.domain.models import Driver, Passenger, TaxiPark, Trip


def drivers(*indices: int) -> frozenset:
    return frozenset(Driver(f"D-{i}") for i in indices)


def passengers(*indices: int) -> frozenset:
    return frozenset(Passenger(f"P-{i}") for i in indices)


def trip(driver: int, pax, duration: int = 10, cost: float = 10.0, discount=None) -> Trip:
    if isinstance(pax, int):
        pax = [pax]
    return Trip(Driver(f"D-{driver}"), passengers(*pax), duration, cost, discount)


def park(n_drivers: int, n_passengers: int, *trips: Trip) -> TaxiPark:
    return TaxiPark(drivers(*range(n_drivers)), passengers(*range(n_passengers)), tuple(trips))


@pytest.fixture
def sample_park() -> TaxiPark:
    # D-0: 3 viajes, D-1: 1 viaje, D-2: ninguno
    return park(
        3,
        4,
        trip(0, [0, 1], duration=12, cost=20.0),
        trip(0, [0], duration=5, cost=10.0, discount=0.2),
        trip(0, [0, 2], duration=14, cost=15.0, discount=0.1),
        trip(1, [1], duration=23, cost=30.0, discount=0.0),
    )
