"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api import dashboard, health, menu, notifications, orders
from app.core.config import settings
from app.core.dependencies import get_restaurant_store, init_store
from app.core.logging import setup_logging
from app.services.restaurant.exceptions import NotFoundError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    init_store()
    yield
    # Shutdown: let in-flight availability confirmations settle
    store_provider = app.dependency_overrides.get(
        get_restaurant_store, get_restaurant_store
    )
    await store_provider().wait_for_pending()


app = FastAPI(
    title=f"{settings.restaurant_name} Back Office",
    description="Menu catalog management and order tracking",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    """Map missing menu items and orders to 404."""
    return JSONResponse(status_code=404, content={"detail": str(exc)})


app.include_router(health.router, tags=["health"])
app.include_router(menu.router, tags=["menu"])
app.include_router(orders.router, tags=["orders"])
app.include_router(dashboard.router, tags=["dashboard"])
app.include_router(notifications.router, tags=["notifications"])


@app.get("/")
async def root():
    """Service banner."""
    return {
        "message": f"{settings.restaurant_name} Back Office API",
        "version": "0.1.0",
    }


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
