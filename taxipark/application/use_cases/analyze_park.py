"""
Analyze park use case. Runs every query over one park. No FastAPI.
"""

import logging
from typing import Optional

from taxipark.application.config import DEFAULT_MIN_TRIPS, DEFAULT_PARETO_POLICY
from taxipark.domain.constraints import ParetoPolicy
from taxipark.domain.models import Driver, ParkReport, TaxiPark
from taxipark.domain.queries import (
    check_pareto_principle,
    find_fake_drivers,
    find_faithful_passengers,
    find_frequent_passengers,
    find_most_frequent_trip_duration_period,
    find_smart_passengers,
)

logger = logging.getLogger(__name__)


def analyze_park(
    park: TaxiPark,
    min_trips: Optional[int] = None,
    driver: Optional[Driver] = None,
    pareto_policy: Optional[ParetoPolicy] = None,
) -> ParkReport:
    """
    Flow: fake drivers -> faithful passengers -> frequent passengers (solo si hay driver)
          -> smart passengers -> duration period -> pareto -> ParkReport.
    """
    if min_trips is None:
        min_trips = DEFAULT_MIN_TRIPS
    if pareto_policy is None:
        pareto_policy = DEFAULT_PARETO_POLICY

    fake = find_fake_drivers(park)
    faithful = find_faithful_passengers(park, min_trips)
    frequent = find_frequent_passengers(park, driver) if driver is not None else None
    smart = find_smart_passengers(park)
    period = find_most_frequent_trip_duration_period(park)
    pareto = check_pareto_principle(park, pareto_policy)

    logger.debug(
        "fake=%d faithful(min_trips=%d)=%d frequent=%s smart=%d",
        len(fake),
        min_trips,
        len(faithful),
        len(frequent) if frequent is not None else "-",
        len(smart),
    )
    logger.info(
        "Analyzed park: %d drivers, %d passengers, %d trips, period=%s, pareto=%s",
        len(park.all_drivers),
        len(park.all_passengers),
        len(park.trips),
        f"{period.start}..{period.stop - 1}" if period is not None else None,
        pareto,
    )

    return ParkReport(
        fake_drivers=fake,
        min_trips=min_trips,
        faithful_passengers=faithful,
        smart_passengers=smart,
        most_frequent_period=period,
        pareto_holds=pareto,
        driver=driver,
        frequent_passengers=frequent,
    )
