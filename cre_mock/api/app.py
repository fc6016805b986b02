"""FastAPI application factory for the CRE mock API."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from cre_mock import __version__
from cre_mock.api import docs
from cre_mock.api.docs import ApiDocs
from cre_mock.api.errors import register_error_handlers
from cre_mock.api.routers import admin, transactions, trends
from cre_mock.config import CreMockConfig
from cre_mock.query.facade import QueryService
from cre_mock.scenarios.market import CreMarketScenario
from cre_mock.store.handle import StoreHandle

logger = logging.getLogger(__name__)


def create_app(
    config: CreMockConfig | None = None,
    handle: StoreHandle | None = None,
) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    config : CreMockConfig | None
        Settings; read from the environment when omitted.
    handle : StoreHandle | None
        Store to serve. When omitted a :class:`CreMarketScenario` sized by
        ``config.generation`` produces the initial dataset and every reset.
    """
    config = config or CreMockConfig.from_env()

    if handle is None:
        scenario = CreMarketScenario.from_config(config.generation, seed=config.seed)
        handle = StoreHandle(scenario.generate_generation)

    app = FastAPI(
        title=config.docs.title,
        description="Mock REST API serving synthetic commercial real-estate transactions.",
        version=__version__,
        # Documentation is served from the bundled static description
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.query_service = QueryService(handle)
    app.state.api_docs = ApiDocs.load(config.docs.spec_path)

    # -- Middleware -----------------------------------------------------------

    # Registered first so CORS wraps the catch-all error middleware
    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- Routers --------------------------------------------------------------

    app.include_router(transactions.router)
    app.include_router(trends.router)
    app.include_router(admin.router)
    app.include_router(docs.router)

    # -- Root & health endpoints ---------------------------------------------

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def root(request: Request) -> str:
        """Landing page listing the endpoints and documentation status."""
        return _landing_page(request.app.state.api_docs)

    @app.get("/health", tags=["meta"])
    def health(request: Request) -> dict[str, Any]:
        """Report the size and age of the dataset being served."""
        generation = request.app.state.query_service.handle.snapshot()
        return {
            "status": "ok",
            "generatedAt": generation.generated_at.isoformat(),
            "counts": generation.summary(),
        }

    logger.info("CRE mock API ready: %s", handle.snapshot().summary())
    return app


def _landing_page(api_docs: ApiDocs) -> str:
    if api_docs.available:
        docs_lines = (
            '<p>Swagger UI available at <a href="/api-docs">/api-docs</a>.</p>'
            '<p>Raw OpenAPI YAML spec available at <a href="/openapi.yaml">/openapi.yaml</a>.</p>'
            '<p>Raw OpenAPI JSON spec available at <a href="/openapi.json">/openapi.json</a>.</p>'
        )
    else:
        docs_lines = "<p>(API documentation failed to load)</p>"
    return (
        "<h1>CRE Mock API Server</h1>"
        "<p>Mock API endpoints available at /v1/...</p>"
        "<p>POST to /v1/reset-data to regenerate mock data.</p>"
        f"{docs_lines}"
    )
