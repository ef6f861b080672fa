"""Food ordering FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering  # noqa: E402
from shared.api import register_error_handlers
from shared.logging import add_context, clear_context
from shop.domain import shop  # noqa: E402

ordering.init()
shop.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/carts": ordering,
    "/orders": ordering,
    "/shops": shop,
    "/menus": shop,
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
    title="Food Ordering API",
    description="Shopping cart, order placement and menu publication",
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
    """Push the correct Protean domain context for each request."""
    clear_context()
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        add_context(domain=domain.name, method=request.method, path=request.url.path)
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match — pass through (health check, docs, etc.)
    return await call_next(request)


register_error_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from ordering.api import cart_router, order_router  # noqa: E402
from shop.api import menu_router, shop_router  # noqa: E402

app.include_router(cart_router)
app.include_router(order_router)
app.include_router(shop_router)
app.include_router(menu_router)


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
                "shop": {"name": shop.name},
            },
        }
    )
