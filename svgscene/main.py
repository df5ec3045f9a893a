"""FastAPI app factory."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgscene import __version__
from svgscene.config import settings
from svgscene.diagnostics import configure_logging

load_dotenv()
configure_logging()


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgscene",
        description="SVG scene resolver — generic SVG trees to typed scene documents and back",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svgscene.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
