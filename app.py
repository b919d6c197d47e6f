"""
FastAPI Application Entry Point - Graph Metrics Web API

Este módulo define la aplicación principal FastAPI que expone
el motor de métricas de grafos a través de una API REST local.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graph_metrics.core.config import API_CONFIG
from graph_metrics.utils.logger import get_logger

# Routers
from api.routers import metrics

logger = get_logger(__name__)

# Crear instancia FastAPI
app = FastAPI(
    title=API_CONFIG.title,
    description=API_CONFIG.description,
    version=API_CONFIG.version,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configurar CORS para desarrollo local
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(API_CONFIG.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar routers
app.include_router(metrics.router, prefix="/api", tags=["Métricas"])


@app.get("/")
async def root():
    """Endpoint raíz - información de la API."""
    return {
        "message": API_CONFIG.title,
        "version": API_CONFIG.version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.on_event("startup")
async def startup_event():
    """Evento de inicio."""
    logger.info(f"Iniciando {API_CONFIG.title} v{API_CONFIG.version}")
    logger.info(f"Documentación disponible en: http://localhost:{API_CONFIG.port}/docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Evento de cierre."""
    logger.info(f"Cerrando {API_CONFIG.title}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app:app",
        host=API_CONFIG.host,
        port=API_CONFIG.port,
        reload=True,
        log_level="info"
    )
