"""FoodDelights storefront FastAPI application.

Serves the Ordering (cart, orders, customers) and Catalogue (products)
domains. Commands are processed synchronously, and each request runs inside
the domain context that owns its URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os

# ---------------------------------------------------------------------------
# Logging and domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the configuration overlay in each domain.toml.
from shared.logging import add_context, clear_context, configure_logging, get_logger  # noqa: E402

configure_logging(log_dir=os.getenv("LOG_DIR"))
logger = get_logger(__name__)

from catalogue.domain import catalogue  # noqa: E402
from fastapi import FastAPI, Request  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from ordering.domain import ordering  # noqa: E402

ordering.init()
catalogue.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/cart": ordering,
    "/orders": ordering,
    "/customers": ordering,
    "/products": catalogue,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="FoodDelights Storefront API",
    description="Food ordering storefront: catalogue, cart, coupons and order tracking",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request.

    The caller and the route are bound into the log context for the request.
    """
    clear_context()
    add_context(
        method=request.method,
        path=request.url.path,
        customer_id=request.headers.get("X-Customer-Id"),
    )
    try:
        domain = _resolve_domain(request.url.path)
        if domain is not None:
            with domain.domain_context():
                return await call_next(request)
        # No domain match: health check, docs, etc.
        return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers and error handling
# ---------------------------------------------------------------------------
from catalogue.api import product_router  # noqa: E402
from ordering.api.routes import cart_router, customer_router, order_router  # noqa: E402
from shared.http import register_exception_handlers  # noqa: E402

app.include_router(cart_router)
app.include_router(order_router)
app.include_router(customer_router)
app.include_router(product_router)

register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "ordering": {"name": ordering.name},
                "catalogue": {"name": catalogue.name},
            },
        }
    )
