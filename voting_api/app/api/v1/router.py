"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers under a unified
prefix.  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import candidates, votes

router = APIRouter()

router.include_router(candidates.router, prefix="/candidates", tags=["candidates"])
router.include_router(votes.router, prefix="/votes", tags=["votes"])
