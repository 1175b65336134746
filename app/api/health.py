# app/api/health.py
from __future__ import annotations

import time

from fastapi import APIRouter

router = APIRouter(tags=["health"])

APP_STARTED_AT = time.time()


@router.get("/live")
async def live():
    return {"status": "ok", "uptime_s": int(time.time() - APP_STARTED_AT)}
