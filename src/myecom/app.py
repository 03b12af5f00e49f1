"""MyEcom FastAPI application.

Processes commands synchronously over HTTP. Every request runs inside the
``myecom`` domain context.

Usage:
    uvicorn myecom.app:create_app --factory --host 0.0.0.0 --port 8000
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from myecom.api.errors import register_exception_handlers
from myecom.api.security import authentication_middleware
from myecom.utils.logging import add_context, clear_context


def create_app() -> FastAPI:
    # PROTEAN_ENV selects the domain.toml overlay before the domain initializes
    from myecom.domain import init_domain

    shop = init_domain()

    app = FastAPI(
        title="MyEcom API",
        description="E-commerce backend — auth, catalogue, cart and orders",
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
        """Push the domain context and bind request details to the log context."""
        add_context(
            request_id=uuid4().hex[:12],
            request_method=request.method,
            request_path=request.url.path,
            user=getattr(request.state, "user_email", None),
        )
        try:
            with shop.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response

    # Registered last so it runs first and the principal is known to the log context
    app.middleware("http")(authentication_middleware)

    register_exception_handlers(app)

    from myecom.catalogue.api import category_router, product_router
    from myecom.identity.api import router as auth_router
    from myecom.ordering.api import cart_router, order_router

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(cart_router)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": shop.name})

    return app
