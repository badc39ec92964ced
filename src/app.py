"""Dining Hub FastAPI application.

Processes commands synchronously over HTTP. Every request runs inside the
dining domain context; the requester identity arrives in ``X-User-*``
headers set by the gateway.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain.toml overlay (memory store by default,
# PostgreSQL in production).
from dining.domain import dining  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from dining.utils.logging import clear_requester

dining.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Dining Hub API",
    description="Country-partitioned food ordering and shared carts",
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
    """Push the dining domain context for each request."""
    clear_requester()
    with dining.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from dining.api.errors import register_access_handlers  # noqa: E402
from dining.api.routes import (  # noqa: E402
    order_router,
    payment_method_router,
    restaurant_router,
    shared_cart_router,
)

app.include_router(order_router)
app.include_router(shared_cart_router)
app.include_router(restaurant_router)
app.include_router(payment_method_router)

register_exception_handlers(app)
register_access_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": dining.name})
