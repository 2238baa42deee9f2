"""
Persona Engine API - FastAPI backend for memory extraction and persona replies
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from persona_engine import __version__
from persona_engine.application import PersonaEngineService
from persona_engine.config import load_config
from persona_engine.infrastructure.logging import configure_logging

from .routes import catalog, generation, memory


def create_app(service: Optional[PersonaEngineService] = None) -> FastAPI:
    app = FastAPI(
        title="Persona Engine API",
        description="Extract memory profiles from chats and answer in persona voices",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "version": __version__}

    app.include_router(memory.router, prefix="/api", tags=["Memory Extraction"])
    app.include_router(generation.router, prefix="/api", tags=["Persona Responses"])
    app.include_router(catalog.router, prefix="/api", tags=["Catalog"])

    if service is not None:
        app.state.service = service

    @app.on_event("startup")
    async def _startup_service():
        if getattr(app.state, "service", None) is not None:
            return
        config = load_config()
        configure_logging(config.logging)
        app.state.service = PersonaEngineService.from_config(config)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
