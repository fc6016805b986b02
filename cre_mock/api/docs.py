"""Static API description and the documentation endpoints serving it."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from fastapi import APIRouter, Depends, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, Response

from cre_mock.exceptions import DocsUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiDocs:
    """The bundled OpenAPI description, or the reason it is missing."""

    raw_yaml: str | None = None
    document: dict[str, Any] | None = None
    error: str | None = None

    @property
    def available(self) -> bool:
        return self.document is not None

    @property
    def raw_json(self) -> str:
        """The description re-encoded as JSON."""
        return json.dumps(self.require(), indent=2, default=str)

    def require(self) -> dict[str, Any]:
        """Return the parsed description or raise :class:`DocsUnavailableError`."""
        if self.document is None:
            raise DocsUnavailableError(f"API documentation is unavailable: {self.error}")
        return self.document

    @classmethod
    def load(cls, path: Path) -> ApiDocs:
        """Read and parse the YAML description at ``path``.

        Never raises: a missing or malformed file is logged and yields an
        unavailable :class:`ApiDocs`, so the data endpoints still start.
        """
        logger.info("Loading OpenAPI description from %s", path)
        try:
            raw_yaml = Path(path).read_text(encoding="utf-8")
            document = yaml.safe_load(raw_yaml)
        except (OSError, yaml.YAMLError) as exc:
            logger.error("Failed to load or parse %s: %s", path, exc)
            logger.warning("Swagger UI, /openapi.yaml and /openapi.json will not be available")
            return cls(error=str(exc))

        if not isinstance(document, dict):
            logger.error("OpenAPI description at %s is not a mapping", path)
            return cls(error="description is not a mapping")

        logger.info("OpenAPI description loaded")
        return cls(raw_yaml=raw_yaml, document=document)


def _docs(request: Request) -> ApiDocs:
    return request.app.state.api_docs


router = APIRouter(tags=["docs"])


@router.get("/openapi.yaml", include_in_schema=False)
def openapi_yaml(docs: ApiDocs = Depends(_docs)) -> Response:
    """Raw YAML description."""
    docs.require()
    return Response(content=docs.raw_yaml, media_type="application/yaml; charset=utf-8")


@router.get("/openapi.json", include_in_schema=False)
def openapi_json(docs: ApiDocs = Depends(_docs)) -> Response:
    """Description re-encoded as JSON."""
    return Response(content=docs.raw_json, media_type="application/json; charset=utf-8")


@router.get("/api-docs", include_in_schema=False)
def swagger_ui(request: Request, docs: ApiDocs = Depends(_docs)) -> HTMLResponse:
    """Interactive Swagger UI over ``/openapi.json``."""
    document = docs.require()
    title = document.get("info", {}).get("title", request.app.title)
    return get_swagger_ui_html(openapi_url="/openapi.json", title=f"{title} - Swagger UI")
