"""
Taxi park API router. Calls application/domain only. No business logic.
"""

import logging
from typing import Iterable, Optional

from fastapi import APIRouter, HTTPException

from taxipark.api.schemas import (
    DriversResponse,
    DurationPeriodSchema,
    NiceStringRequest,
    NiceStringResponse,
    ParetoResponse,
    ParkReportSchema,
    PassengersResponse,
    PeriodResponse,
    ReportRequest,
    TaxiParkSchema,
)
from taxipark.application.config import DEFAULT_PARETO_POLICY
from taxipark.application.use_cases.analyze_park import analyze_park
from taxipark.domain.models import Driver, TaxiPark
from taxipark.domain.nice_string import is_nice
from taxipark.domain.queries import (
    check_pareto_principle,
    find_fake_drivers,
    find_faithful_passengers,
    find_frequent_passengers,
    find_most_frequent_trip_duration_period,
    find_smart_passengers,
)
from taxipark.infrastructure.park_loader import load_park

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/park", tags=["park"])
strings_router = APIRouter(prefix="/strings", tags=["strings"])


def _to_park(schema: TaxiParkSchema) -> TaxiPark:
    return load_park(schema.model_dump())


def _names(items: Iterable) -> list[str]:
    return sorted(i.name for i in items)


def _period_schema(period: Optional[range]) -> Optional[DurationPeriodSchema]:
    if period is None:
        return None
    return DurationPeriodSchema(start=period.start, end=period.stop - 1)


@router.post("/report", response_model=ParkReportSchema)
def post_report(request: ReportRequest) -> ParkReportSchema:
    """
    POST /park/report
    Runs every query. frequent_passengers only when driver is sent.
    """
    try:
        park = _to_park(request.park)
        driver = Driver(request.driver) if request.driver is not None else None
        report = analyze_park(park, min_trips=request.min_trips, driver=driver)
        return ParkReportSchema(
            fake_drivers=_names(report.fake_drivers),
            min_trips=report.min_trips,
            faithful_passengers=_names(report.faithful_passengers),
            driver=report.driver.name if report.driver is not None else None,
            frequent_passengers=(
                _names(report.frequent_passengers)
                if report.frequent_passengers is not None
                else None
            ),
            smart_passengers=_names(report.smart_passengers),
            most_frequent_period=_period_schema(report.most_frequent_period),
            pareto_holds=report.pareto_holds,
        )
    except ValueError as e:
        logger.warning("Rejected report request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Report failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/fake-drivers", response_model=DriversResponse)
def post_fake_drivers(park: TaxiParkSchema) -> DriversResponse:
    """POST /park/fake-drivers — drivers with no trips."""
    try:
        return DriversResponse(drivers=_names(find_fake_drivers(_to_park(park))))
    except Exception as e:
        logger.exception("fake-drivers failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/faithful-passengers", response_model=PassengersResponse)
def post_faithful_passengers(park: TaxiParkSchema, min_trips: int) -> PassengersResponse:
    """
    POST /park/faithful-passengers?min_trips=N

    min_trips < 0 -> 400.
    """
    try:
        result = find_faithful_passengers(_to_park(park), min_trips)
        return PassengersResponse(passengers=_names(result))
    except ValueError as e:
        logger.warning("Rejected faithful-passengers request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("faithful-passengers failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/frequent-passengers", response_model=PassengersResponse)
def post_frequent_passengers(park: TaxiParkSchema, driver: str) -> PassengersResponse:
    """POST /park/frequent-passengers?driver=NAME"""
    try:
        result = find_frequent_passengers(_to_park(park), Driver(driver))
        return PassengersResponse(passengers=_names(result))
    except Exception as e:
        logger.exception("frequent-passengers failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/smart-passengers", response_model=PassengersResponse)
def post_smart_passengers(park: TaxiParkSchema) -> PassengersResponse:
    try:
        return PassengersResponse(passengers=_names(find_smart_passengers(_to_park(park))))
    except Exception as e:
        logger.exception("smart-passengers failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/duration-period", response_model=PeriodResponse)
def post_duration_period(park: TaxiParkSchema) -> PeriodResponse:
    """POST /park/duration-period — period is null when there are no trips."""
    try:
        period = find_most_frequent_trip_duration_period(_to_park(park))
        return PeriodResponse(period=_period_schema(period))
    except Exception as e:
        logger.exception("duration-period failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/pareto", response_model=ParetoResponse)
def post_pareto(park: TaxiParkSchema) -> ParetoResponse:
    try:
        return ParetoResponse(holds=check_pareto_principle(_to_park(park), DEFAULT_PARETO_POLICY))
    except Exception as e:
        logger.exception("pareto failed")
        raise HTTPException(status_code=500, detail=str(e))


@strings_router.post("/nice", response_model=NiceStringResponse)
def post_nice(request: NiceStringRequest) -> NiceStringResponse:
    return NiceStringResponse(value=request.value, nice=is_nice(request.value))
