import pytest

from conftest import drivers, park, passengers, trip
from taxipark.domain.constraints import ParetoPolicy
from taxipark.domain.models import Driver, Passenger, TaxiPark
from taxipark.domain.queries import (
    check_pareto_principle,
    count_trips_per_passenger,
    find_fake_drivers,
    find_faithful_passengers,
    find_frequent_passengers,
    find_most_frequent_trip_duration_period,
    find_smart_passengers,
    income_by_driver,
)


def test_count_trips_per_passenger_counts_each_member(sample_park):
    counts = count_trips_per_passenger(sample_park.trips)
    assert counts[Passenger("P-0")] == 3
    assert counts[Passenger("P-1")] == 2
    assert counts[Passenger("P-2")] == 1
    assert Passenger("P-3") not in counts


def test_income_by_driver(sample_park):
    assert income_by_driver(sample_park.trips) == {Driver("D-0"): 45.0, Driver("D-1"): 30.0}


# --- fake drivers ---


def test_fake_drivers(sample_park):
    assert find_fake_drivers(sample_park) == drivers(2)


def test_fake_drivers_single_trip():
    p = park(2, 1, trip(0, 0))
    assert find_fake_drivers(p) == drivers(1)


def test_fake_drivers_no_trips_returns_everyone():
    assert find_fake_drivers(park(3, 1)) == drivers(0, 1, 2)


def test_fake_drivers_ignores_dangling_trip_driver():
    p = park(1, 1, trip(0, 0), trip(7, 0))
    result = find_fake_drivers(p)
    assert result == frozenset()
    assert result <= p.all_drivers


# --- faithful passengers ---


def test_faithful_zero_returns_all_passengers(sample_park):
    assert find_faithful_passengers(sample_park, 0) == sample_park.all_passengers


def test_faithful_zero_includes_passengers_without_trips():
    assert find_faithful_passengers(park(1, 3), 0) == passengers(0, 1, 2)


@pytest.mark.parametrize(
    "min_trips,expected",
    [(1, passengers(0, 1, 2)), (2, passengers(0, 1)), (3, passengers(0)), (4, frozenset())],
)
def test_faithful_threshold(sample_park, min_trips, expected):
    assert find_faithful_passengers(sample_park, min_trips) == expected


def test_faithful_monotonic(sample_park):
    sizes = [len(find_faithful_passengers(sample_park, n)) for n in range(1, 6)]
    assert sizes == sorted(sizes, reverse=True)


def test_faithful_three_trips_together():
    p = park(1, 2, trip(0, [0, 1]), trip(0, 0), trip(0, 0))
    assert find_faithful_passengers(p, 3) == passengers(0)


def test_faithful_negative_raises(sample_park):
    with pytest.raises(ValueError):
        find_faithful_passengers(sample_park, -1)


# --- frequent passengers ---


def test_frequent_passengers(sample_park):
    assert find_frequent_passengers(sample_park, Driver("D-0")) == passengers(0)


def test_frequent_passengers_excludes_single_rides():
    p = park(1, 2, trip(0, 0), trip(0, [0, 1]), trip(0, 1))
    assert find_frequent_passengers(p, Driver("D-0")) == passengers(0, 1)
    p = park(1, 3, trip(0, 0), trip(0, [0, 1]), trip(0, 2))
    assert find_frequent_passengers(p, Driver("D-0")) == passengers(0)


def test_frequent_passengers_only_counts_given_driver():
    p = park(2, 1, trip(0, 0), trip(1, 0))
    assert find_frequent_passengers(p, Driver("D-0")) == frozenset()


def test_frequent_passengers_unknown_driver(sample_park):
    assert find_frequent_passengers(sample_park, Driver("nobody")) == frozenset()


# --- smart passengers ---


def test_smart_passengers(sample_park):
    assert find_smart_passengers(sample_park) == passengers(0, 2)


def test_smart_zero_discount_counts_as_full_price():
    p = park(1, 1, trip(0, 0, discount=0.0), trip(0, 0, discount=0.0), trip(0, 0, discount=0.5))
    assert find_smart_passengers(p) == frozenset()


def test_smart_requires_strict_majority():
    p = park(1, 1, trip(0, 0, discount=0.1), trip(0, 0))
    assert find_smart_passengers(p) == frozenset()


def test_smart_never_includes_passenger_without_discounts():
    p = park(1, 2, trip(0, 0), trip(0, 1, discount=0.3))
    result = find_smart_passengers(p)
    assert passengers(0).isdisjoint(result)
    assert result == passengers(1)


# --- duration period ---


def test_period_most_common_bucket():
    p = park(1, 1, *(trip(0, 0, duration=d) for d in [5, 12, 14, 23]))
    assert find_most_frequent_trip_duration_period(p) == range(10, 20)


def test_period_sample(sample_park):
    period = find_most_frequent_trip_duration_period(sample_park)
    assert period.start == 10
    assert period.stop - 1 == 19


def test_period_none_without_trips():
    assert find_most_frequent_trip_duration_period(park(1, 1)) is None


def test_period_boundaries():
    p = park(1, 1, trip(0, 0, duration=30), trip(0, 0, duration=39), trip(0, 0, duration=40))
    assert find_most_frequent_trip_duration_period(p) == range(30, 40)


def test_period_tie_returns_a_maximal_bucket():
    durations = [1, 11, 25, 27, 3, 15]
    p = park(1, 1, *(trip(0, 0, duration=d) for d in durations))
    period = find_most_frequent_trip_duration_period(p)
    assert period.start % 10 == 0
    assert len(period) == 10
    assert sum(1 for d in durations if d in period) == 2


# --- pareto ---


def test_pareto_false_when_empty():
    assert check_pareto_principle(park(5, 1)) is False
    assert check_pareto_principle(TaxiPark(frozenset(), passengers(0), (trip(0, 0),))) is False
    assert check_pareto_principle(TaxiPark(drivers(0), frozenset(), (trip(0, 0),))) is False


def test_pareto_holds():
    p = park(
        5,
        2,
        trip(0, 0, cost=100.0),
        trip(1, 1, cost=10.0),
        trip(2, 1, cost=10.0),
    )
    assert check_pareto_principle(p) is True


def test_pareto_does_not_hold():
    p = park(
        5,
        2,
        trip(0, 0, cost=90.0),
        trip(1, 1, cost=30.0),
    )
    assert check_pareto_principle(p) is False


def test_pareto_elite_truncated_to_zero(sample_park):
    # 3 conductores -> 3 * 20 // 100 == 0
    assert check_pareto_principle(sample_park) is False


def test_pareto_zero_income_with_empty_elite():
    assert check_pareto_principle(park(1, 1, trip(0, 0, cost=0.0))) is True


def test_pareto_exact_threshold():
    # elite gana 80 de 100
    p = park(5, 1, trip(0, 0, cost=80.0), trip(1, 0, cost=20.0))
    assert check_pareto_principle(p) is True


def test_pareto_custom_policy():
    p = park(2, 1, trip(0, 0, cost=60.0), trip(1, 0, cost=40.0))
    assert check_pareto_principle(p) is False
    assert check_pareto_principle(p, ParetoPolicy(top_driver_pct=50, income_pct=60)) is True


def test_queries_do_not_mutate(sample_park):
    before = (sample_park.all_drivers, sample_park.all_passengers, sample_park.trips)
    find_fake_drivers(sample_park)
    find_faithful_passengers(sample_park, 0)
    find_smart_passengers(sample_park)
    check_pareto_principle(sample_park)
    assert (sample_park.all_drivers, sample_park.all_passengers, sample_park.trips) == before


def test_pareto_ranks_by_income_not_trip_order():
    # el que más gana aparece el último
    p = park(5, 1, trip(1, 0, cost=10.0), trip(0, 0, cost=90.0))
    assert check_pareto_principle(p) is True


def test_pareto_tied_top_earners():
    # 10 conductores -> élite de 2; D-0 y D-1 empatan con 45, D-2 aparece primero con 10
    p = park(10, 1, trip(2, 0, cost=10.0), trip(0, 0, cost=45.0), trip(1, 0, cost=45.0))
    assert check_pareto_principle(p) is True


@pytest.mark.parametrize(
    "top_driver_pct,income_pct",
    [(-20, 80), (20, -1), (101, 80), (20, 150)],
)
def test_pareto_policy_rejects_out_of_range(top_driver_pct, income_pct):
    with pytest.raises(ValueError):
        ParetoPolicy(top_driver_pct=top_driver_pct, income_pct=income_pct)


def test_pareto_policy_bounds_allowed():
    assert ParetoPolicy(top_driver_pct=0, income_pct=100).top_driver_pct == 0
    assert ParetoPolicy(top_driver_pct=100, income_pct=0).income_pct == 0
