"""
Taxi park API request/response schemas. Pydantic only in api layer.
"""

from pydantic import BaseModel, Field


class TripSchema(BaseModel):
    driver: str
    passengers: list[str] = Field(min_length=1)
    duration: int = Field(ge=0)  # minutos
    cost: float = Field(ge=0.0)
    discount: float | None = Field(default=None, ge=0.0)  # null o 0 = sin descuento


class TaxiParkSchema(BaseModel):
    all_drivers: list[str] = []
    all_passengers: list[str] = []
    trips: list[TripSchema] = []


class ReportRequest(BaseModel):
    park: TaxiParkSchema
    min_trips: int | None = None  # None -> DEFAULT_MIN_TRIPS
    driver: str | None = None  # si se envía, se calcula frequent_passengers


class DurationPeriodSchema(BaseModel):
    start: int
    end: int  # inclusivo: start..end


class ParkReportSchema(BaseModel):
    fake_drivers: list[str]
    min_trips: int
    faithful_passengers: list[str]
    driver: str | None = None
    frequent_passengers: list[str] | None = None
    smart_passengers: list[str]
    most_frequent_period: DurationPeriodSchema | None = None
    pareto_holds: bool


class DriversResponse(BaseModel):
    drivers: list[str]


class PassengersResponse(BaseModel):
    passengers: list[str]


class PeriodResponse(BaseModel):
    period: DurationPeriodSchema | None = None


class ParetoResponse(BaseModel):
    holds: bool


class NiceStringRequest(BaseModel):
    value: str


class NiceStringResponse(BaseModel):
    value: str
    nice: bool
