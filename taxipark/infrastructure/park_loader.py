"""
Taxi park loader. Raw dict -> domain TaxiPark, y vuelta a dict.
"""

from taxipark.domain.models import Driver, Passenger, TaxiPark, Trip


def _load_trip(raw: dict) -> Trip:
    discount = raw.get("discount")
    return Trip(
        driver=Driver(str(raw.get("driver", ""))),
        passengers=frozenset(Passenger(str(p)) for p in raw.get("passengers", [])),
        duration=int(raw.get("duration", 0)),
        cost=float(raw.get("cost", 0.0)),
        discount=float(discount) if discount is not None else None,
    )


def load_park(raw: dict) -> TaxiPark:
    """
    Transform a raw dict into a TaxiPark:
    {"all_drivers": [str], "all_passengers": [str], "trips": [{driver, passengers, duration, cost, discount}]}
    """
    return TaxiPark(
        all_drivers=frozenset(Driver(str(d)) for d in raw.get("all_drivers", [])),
        all_passengers=frozenset(Passenger(str(p)) for p in raw.get("all_passengers", [])),
        trips=tuple(_load_trip(t) for t in raw.get("trips", [])),
    )


def park_to_dict(park: TaxiPark) -> dict:
    """Inverse of load_park. Name lists are sorted; trip order is kept."""
    return {
        "all_drivers": sorted(d.name for d in park.all_drivers),
        "all_passengers": sorted(p.name for p in park.all_passengers),
        "trips": [
            {
                "driver": t.driver.name,
                "passengers": sorted(p.name for p in t.passengers),
                "duration": t.duration,
                "cost": t.cost,
                "discount": t.discount,
            }
            for t in park.trips
        ],
    }
