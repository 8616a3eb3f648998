"""
Taxi park queries. Pure functions only. No FastAPI, no I/O.
Each query reads the park and returns a new value; the park is never mutated.
"""

from collections import Counter
from typing import FrozenSet, Iterable, Optional

from .constraints import ParetoPolicy
from .models import Driver, Passenger, TaxiPark, Trip

PERIOD_MINUTES = 10


def count_trips_per_passenger(trips: Iterable[Trip]) -> Counter:
    """A trip with N passengers adds one to each of the N counts."""
    counts: Counter = Counter()
    for trip in trips:
        counts.update(trip.passengers)
    return counts


def income_by_driver(trips: Iterable[Trip]) -> dict[Driver, float]:
    income: dict[Driver, float] = {}
    for trip in trips:
        income[trip.driver] = income.get(trip.driver, 0.0) + trip.cost
    return income


def find_fake_drivers(park: TaxiPark) -> FrozenSet[Driver]:
    """Drivers known to the park who performed no trips."""
    drivers_with_trips = {t.driver for t in park.trips}
    return frozenset(park.all_drivers - drivers_with_trips)


def find_faithful_passengers(park: TaxiPark, min_trips: int) -> FrozenSet[Passenger]:
    """
    Passengers with at least min_trips trips.
    min_trips == 0 returns every known passenger, including those with no trips.
    """
    if min_trips < 0:
        raise ValueError(f"min_trips must be >= 0, got {min_trips}")
    if min_trips == 0:
        return frozenset(park.all_passengers)
    counts = count_trips_per_passenger(park.trips)
    return frozenset(p for p, n in counts.items() if n >= min_trips)


def find_frequent_passengers(park: TaxiPark, driver: Driver) -> FrozenSet[Passenger]:
    """Passengers taken by the given driver more than once."""
    counts = count_trips_per_passenger(t for t in park.trips if t.driver == driver)
    return frozenset(p for p, n in counts.items() if n > 1)


def find_smart_passengers(park: TaxiPark) -> FrozenSet[Passenger]:
    """Passengers who had a discount on the majority of their trips."""
    discounted = count_trips_per_passenger(t for t in park.trips if t.has_discount)
    full_price = count_trips_per_passenger(t for t in park.trips if not t.has_discount)
    return frozenset(p for p, n in discounted.items() if n > full_price.get(p, 0))


def find_most_frequent_trip_duration_period(park: TaxiPark) -> Optional[range]:
    """
    Most frequent duration period among 0..9, 10..19, 20..29 and so on.
    Returned as range(start, start + 10). On a tie the bucket seen first in trip
    order wins. None if there are no trips.
    """
    if not park.trips:
        return None
    buckets = Counter(t.duration // PERIOD_MINUTES for t in park.trips)
    best = max(buckets, key=lambda k: buckets[k])
    start = best * PERIOD_MINUTES
    return range(start, start + PERIOD_MINUTES)


def check_pareto_principle(
    park: TaxiPark,
    policy: ParetoPolicy = ParetoPolicy(),
) -> bool:
    """
    Check whether 20% of the drivers contribute 80% of the income.
    The elite size is truncated: with fewer than 5 drivers it is empty.
    """
    if not park.trips or not park.all_drivers or not park.all_passengers:
        return False

    income = income_by_driver(park.trips)
    ranked = sorted(income.items(), key=lambda x: -x[1])

    top_count = len(park.all_drivers) * policy.top_driver_pct // 100
    elite = {driver for driver, _ in ranked[:top_count]}

    total_income = sum(t.cost for t in park.trips)
    threshold = (total_income * policy.income_pct) / 100

    elite_income = sum(t.cost for t in park.trips if t.driver in elite)
    return elite_income >= threshold
