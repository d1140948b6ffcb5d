"""
FastAPI Application Entry Point - Motores de Grafos Web API

Expone la verificación de consistencia, el rastreo de contactos y las
distancias de colaboración a través de una API REST local.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.utils.logger import get_logger

# Routers
from api.routers import consistency, tracing, collaboration

logger = get_logger(__name__)

# Crear instancia FastAPI
app = FastAPI(
    title="Motores de Grafos API",
    description="Consistencia de hechos, rastreo de contactos y distancias de colaboración",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configurar CORS para desarrollo local
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar routers
app.include_router(consistency.router, prefix="/api", tags=["Consistencia"])
app.include_router(tracing.router, prefix="/api", tags=["Rastreo"])
app.include_router(collaboration.router, prefix="/api", tags=["Colaboración"])


@app.get("/")
async def root():
    """Endpoint raíz - información de la API."""
    return {
        "message": "Motores de Grafos API",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.on_event("startup")
async def startup_event():
    logger.info("Iniciando Motores de Grafos API v1.0.0")
    logger.info("Documentación disponible en: http://localhost:8000/docs")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
