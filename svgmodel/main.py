"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgmodel import __version__
from svgmodel.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgmodel_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgmodel",
        description="Parse typed SVG documents and serialize them back",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Fail fast if an element kind has no reader or writer
    from svgmodel.svg.registry import load_codecs

    load_codecs()

    from svgmodel.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
