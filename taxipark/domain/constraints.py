"""
Taxi park policies. Dataclasses only. No FastAPI, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParetoPolicy:
    # % de conductores (truncado) que forman la élite
    top_driver_pct: int = 20
    # % mínimo de ingresos que debe generar la élite
    income_pct: int = 80

    def __post_init__(self):
        for name in ("top_driver_pct", "income_pct"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")
