"""
giftcart - FastAPI Application

Serves the catalog and the single in-memory cart to a browser front end.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from giftcart import __version__
from giftcart.logging import get_logger
from giftcart.routers import cart_router, products_router
from giftcart.routers.deps import get_cart_engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    engine = get_cart_engine()
    logger.info(
        f"Cart ready: {len(engine.catalog)} products, gift '{engine.gift.name}' "
        f"at {engine.threshold}"
    )
    yield


app = FastAPI(
    title="giftcart",
    description="Shopping cart with a spend-threshold free gift",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products_router, prefix="/api")
app.include_router(cart_router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "giftcart"}
