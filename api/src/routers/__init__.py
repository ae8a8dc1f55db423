"""API routers, one module per resource.

Each module defines its own ``APIRouter`` with tags; routers are registered
explicitly in ``api.src.main``.
"""
