"""
OpenAPI document generation.

The document is built by FastAPI from the registered routes and their
Pydantic models, so paths and schemas cannot drift from the handlers. This
module adds what route signatures alone do not carry:
- Tag descriptions
- Component schemas for models that no route references directly
  (e.g. PaginationParams, which is expanded into query parameters)
- 400 in place of FastAPI's default 422 for request decoding errors
- A hook for security schemes
"""

from typing import Any, Dict, Iterable, List, Type

import structlog
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel

from api.src.models import DOCUMENTED_SCHEMAS

logger = structlog.get_logger(__name__)

OPENAPI_URL = "/api-docs/openapi.json"
SWAGGER_UI_URL = "/swagger-ui"

OPENAPI_TAGS: List[Dict[str, str]] = [
    {"name": "Home", "description": "HTML landing page"},
    {"name": "Health", "description": "Service health checks"},
    {"name": "Users", "description": "User accounts"},
    {"name": "Wallets", "description": "Wallets owned by users"},
    {"name": "Transfers", "description": "Transfers between wallets"},
    {"name": "Products", "description": "Product catalog"},
]

_REF_TEMPLATE = "#/components/schemas/{model}"


def register_component_schemas(
    openapi_schema: Dict[str, Any],
    models: Iterable[Type[BaseModel]],
) -> Dict[str, Any]:
    """
    Add each model to ``components/schemas`` unless FastAPI already did.

    Nested model definitions are hoisted alongside their parent.
    """
    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    for model in models:
        name = model.__name__
        if name in schemas:
            continue
        model_schema = model.model_json_schema(ref_template=_REF_TEMPLATE)
        for def_name, definition in model_schema.pop("$defs", {}).items():
            schemas.setdefault(def_name, definition)
        schemas[name] = model_schema
    return openapi_schema


def drop_unprocessable_responses(openapi_schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Remove FastAPI's generated 422 responses.

    Request decoding errors are answered with 400 and documented through
    ErrorResponse, so the 422 entries and their schemas would be wrong.
    """
    for path_item in openapi_schema.get("paths", {}).values():
        for operation in path_item.values():
            operation.get("responses", {}).pop("422", None)

    schemas = openapi_schema.get("components", {}).get("schemas", {})
    for name in ("HTTPValidationError", "ValidationError"):
        schemas.pop(name, None)
    return openapi_schema


def apply_security_schemes(openapi_schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Attach security schemes to the document.

    The API is unauthenticated, so nothing is registered; this is where
    ``components/securitySchemes`` would be populated.
    """
    return openapi_schema


def build_openapi(app: FastAPI) -> Dict[str, Any]:
    """Generate the OpenAPI document for ``app`` and cache it on the app."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=app.openapi_tags,
        separate_input_output_schemas=False,
    )
    drop_unprocessable_responses(openapi_schema)
    register_component_schemas(openapi_schema, DOCUMENTED_SCHEMAS)
    apply_security_schemes(openapi_schema)

    logger.debug(
        "openapi_schema_generated",
        paths=len(openapi_schema.get("paths", {})),
        schemas=len(openapi_schema["components"]["schemas"]),
    )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def install_openapi(app: FastAPI) -> None:
    """Replace the app's default schema generator with :func:`build_openapi`."""
    app.openapi = lambda: build_openapi(app)
