# app/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.api.health import router as health_router
from app.api.price import router as price_router

from app.config.settings import get_settings


logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("coin_price.app")


app = FastAPI(title="Coin Price Text")

# Routers
app.include_router(health_router)
app.include_router(price_router)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("❌ unhandled error | path=%s", request.url.path)
    return PlainTextResponse("Internal server error.", status_code=500)
