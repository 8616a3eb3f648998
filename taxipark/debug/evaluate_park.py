"""
Evaluación de las consultas sobre un parque sintético.

Genera un parque con ingresos concentrados (pesos Pareto por conductor) y
reporta todas las consultas:
- Conductores sin viajes, pasajeros fieles / frecuentes / "smart".
- Periodo de duración más frecuente.
- Regla 20/80.

Uso (desde raíz del repo):
  python -m taxipark.debug.evaluate_park
  python -m taxipark.debug.evaluate_park --drivers 50 --trips 2000 --shape 1.16
  python -m taxipark.debug.evaluate_park --dump park.json   # guarda el parque generado
"""

import argparse
import json
import logging
from pathlib import Path

import numpy as np

from taxipark.application.config import DEFAULT_MIN_TRIPS, DEFAULT_PARETO_POLICY
from taxipark.application.use_cases.analyze_park import analyze_park
from taxipark.domain.models import Driver, Passenger, TaxiPark, Trip
from taxipark.domain.queries import income_by_driver
from taxipark.infrastructure.park_loader import park_to_dict

logger = logging.getLogger(__name__)

MAX_PASSENGERS_PER_TRIP = 4
DISCOUNTS = (0.1, 0.2, 0.3, 0.4)


def generate_park(
    n_drivers: int,
    n_passengers: int,
    n_trips: int,
    shape: float = 1.16,
    discount_rate: float = 0.3,
    seed: int = 42,
) -> TaxiPark:
    """
    Parque sintético determinista (misma seed = mismo parque).
    shape: parámetro de la Pareto para el peso de cada conductor; ~1.16 da la regla 80/20.
    Los pasajeros y conductores sin viajes se mantienen en all_passengers/all_drivers.
    """
    rng = np.random.default_rng(seed)
    drivers = [Driver(f"D-{i}") for i in range(n_drivers)]
    passengers = [Passenger(f"P-{i}") for i in range(n_passengers)]

    weights = rng.pareto(shape, size=n_drivers) + 1.0
    weights = weights / weights.sum()

    trips = []
    if drivers and passengers:
        for _ in range(n_trips):
            driver = drivers[int(rng.choice(n_drivers, p=weights))]
            n_pax = int(rng.integers(1, min(MAX_PASSENGERS_PER_TRIP, n_passengers) + 1))
            pax_idx = rng.choice(n_passengers, size=n_pax, replace=False)
            duration = int(rng.gamma(shape=2.0, scale=10.0))
            cost = round(2.5 + duration * float(rng.uniform(0.5, 1.5)), 2)
            discount = float(rng.choice(DISCOUNTS)) if rng.random() < discount_rate else None
            trips.append(
                Trip(
                    driver=driver,
                    passengers=frozenset(passengers[int(i)] for i in pax_idx),
                    duration=duration,
                    cost=cost,
                    discount=discount,
                )
            )

    return TaxiPark(
        all_drivers=frozenset(drivers),
        all_passengers=frozenset(passengers),
        trips=tuple(trips),
    )


def main():
    parser = argparse.ArgumentParser(description="Evaluar consultas sobre un parque sintético")
    parser.add_argument("--drivers", type=int, default=20, help="Número de conductores")
    parser.add_argument("--passengers", type=int, default=100, help="Número de pasajeros")
    parser.add_argument("--trips", type=int, default=500, help="Número de viajes")
    parser.add_argument("--shape", type=float, default=1.16, help="Shape Pareto de ingresos")
    parser.add_argument("--discount-rate", type=float, default=0.3, help="Probabilidad de descuento")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--min-trips", type=int, default=DEFAULT_MIN_TRIPS, help="Umbral pasajeros fieles")
    parser.add_argument("--driver", type=str, default=None, help="Conductor para pasajeros frecuentes (ej. D-0)")
    parser.add_argument("--dump", type=Path, default=None, help="Guardar el parque generado en JSON")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.min_trips < 0:
        print(f"ERROR: --min-trips debe ser >= 0 (recibido {args.min_trips})")
        return 1

    park = generate_park(
        args.drivers,
        args.passengers,
        args.trips,
        shape=args.shape,
        discount_rate=args.discount_rate,
        seed=args.seed,
    )
    logger.info("Parque generado: %d conductores, %d pasajeros, %d viajes",
                len(park.all_drivers), len(park.all_passengers), len(park.trips))

    if args.dump is not None:
        args.dump.write_text(json.dumps(park_to_dict(park), indent=2), encoding="utf-8")
        print(f"Parque guardado: {args.dump}")

    driver = Driver(args.driver) if args.driver else None
    r = analyze_park(park, min_trips=args.min_trips, driver=driver)

    incomes = np.sort(np.array(list(income_by_driver(park.trips).values()), dtype=float))[::-1]
    total = float(incomes.sum())
    top_count = len(park.all_drivers) * DEFAULT_PARETO_POLICY.top_driver_pct // 100
    top_share = float(incomes[:top_count].sum()) / total * 100.0 if total > 0 else 0.0

    # ---- Consultas ----
    print("\n--- Consultas ---")
    print(f"  Conductores sin viajes:        {len(r.fake_drivers)}")
    print(f"  Pasajeros fieles (>= {r.min_trips}):     {len(r.faithful_passengers)}")
    if r.frequent_passengers is not None:
        print(f"  Pasajeros frecuentes de {r.driver.name}: {len(r.frequent_passengers)}")
    print(f"  Pasajeros smart:               {len(r.smart_passengers)}")
    if r.most_frequent_period is not None:
        p = r.most_frequent_period
        print(f"  Periodo más frecuente:         {p.start}..{p.stop - 1} min")
    else:
        print("  Periodo más frecuente:         (sin viajes)")

    # ---- Pareto ----
    print("\n--- Regla 20/80 ---")
    print(f"  Ingresos totales: {total:.2f}")
    print(f"  Top {top_count} conductores: {top_share:.1f}% de los ingresos")
    print(f"  Cumple:           {'OK' if r.pareto_holds else 'NO'}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
