"""Storefront FastAPI application.

Serves catalogue reads/writes and order placement over HTTP. Each request is
wrapped in the storefront domain context; the caller's principal is resolved
from the Authorization header per request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront.domain import storefront
from storefront.notification.dispatcher import shutdown_dispatcher
from storefront.utils.logging import bind_request_context, clear_request_context

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay from storefront/domain.toml.
storefront.init()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    # Let queued confirmations finish before the process exits.
    shutdown_dispatcher(wait=True)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Hierarchical catalogue and order placement",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and tag log events for each request."""
    bind_request_context(request_id=uuid4().hex, method=request.method, path=request.url.path)
    try:
        with storefront.domain_context():
            response = await call_next(request)
    finally:
        clear_request_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    category_router,
    customer_router,
    order_router,
    product_router,
    register_exception_handlers,
)

register_exception_handlers(app)
app.include_router(category_router)
app.include_router(product_router)
app.include_router(order_router)
app.include_router(customer_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
