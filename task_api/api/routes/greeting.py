"""Greeting Routes — unversioned root and /hola endpoints stamped with server time.

The stamp is the server's local wall-clock time (naive datetime.now()),
not UTC. Stored task dates stay UTC.
"""

import logging
from datetime import datetime

from fastapi import APIRouter

logger = logging.getLogger(__name__)
router = APIRouter(tags=["greeting"])


def _stamp(now: datetime) -> str:
    return f"{now.strftime('%d/%m/%Y')} {now.strftime('%H:%M:%S')}"


@router.get("/")
async def root():
    logger.debug("root requested")
    return {"message": f"raiz {_stamp(datetime.now())}"}


@router.get("/hola")
async def hola():
    logger.debug("hola requested")
    return {"message": f"hello  {_stamp(datetime.now())}"}
