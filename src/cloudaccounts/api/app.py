# src/cloudaccounts/api/app.py
"""
FastAPI application factory for the cloudaccounts API.

The API exposes account, zone and provider resolution to configuration UIs.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cloudaccounts import __version__
from cloudaccounts.api.routers import accounts, providers
from cloudaccounts.api.routers import config as config_router
from cloudaccounts.core.config import config

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        A configured FastAPI application instance.
    """
    app = FastAPI(
        title="cloudaccounts API",
        description="Resolves the cloud accounts, providers and availability zones a deployment may use.",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(providers.router, prefix="/api/v1", tags=["Providers"])
    app.include_router(accounts.router, prefix="/api/v1", tags=["Accounts"])
    app.include_router(config_router.router, prefix="/api/v1", tags=["Config"])

    return app


def main():
    """Entry point for the cloudaccounts-api console script."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting cloudaccounts API (credentials service: %s)", config.CREDENTIALS_API_URL)
    uvicorn.run(create_app(), host=config.API_HOST, port=config.API_PORT)
