"""
Configuración por defecto para el caso de uso analyze_park y la API.
Un solo lugar para evitar duplicar valores entre API, debug y use case.
"""

from taxipark.domain.constraints import ParetoPolicy

# Umbral de viajes por defecto para "pasajeros fieles"
DEFAULT_MIN_TRIPS = 2

# Regla 20/80 clásica
DEFAULT_PARETO_POLICY = ParetoPolicy(top_driver_pct=20, income_pct=80)

API_TITLE = "Taxi Park API"
API_DESCRIPTION = "Consultas analíticas sobre un parque de taxis en memoria"
API_VERSION = "1.0.0"

CORS_ORIGINS = [
    "http://localhost:5173",
]
