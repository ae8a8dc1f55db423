"""FastAPI service for users, wallets, transfers and products.

This package provides REST API endpoints with generated OpenAPI
documentation. Responses are synthesized per request; there is no
persistence layer.
"""

__version__ = "1.0.0"
