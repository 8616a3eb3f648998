"""
FastAPI app for the taxi park queries.

Capa API HTTP sobre el dominio. Sin estado: cada petición trae su parque.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taxipark.api.router import router, strings_router
from taxipark.application.config import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CORS_ORIGINS,
)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
app.include_router(strings_router)


@app.get("/")
def root():
    """Endpoint raíz"""
    return {"message": f"{API_TITLE} v{API_VERSION}", "status": "ok"}


# Bloque para ejecutar con uvicorn
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
