"""System routes: demo data seeding.

`GET /api/seed` loads the demo dataset through `votehub.seed.seed_database`.
It takes no parameters and has no authentication; calling it again is a no-op
for rows that already exist.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from votehub import schemas
from votehub.database import get_db
from votehub.errors import make_error_payload
from votehub.seed import SeedDataset, seed_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["System"])


def get_seed_dataset() -> SeedDataset:
    """Dataset used by the seed endpoint; overridable in tests."""
    return SeedDataset.demo()


@router.get("/seed", response_model=schemas.SeedResponse, responses={500: {"description": "Seeding failed and was rolled back"}})
def seed_data(db: Session = Depends(get_db), dataset: SeedDataset = Depends(get_seed_dataset)):
    result = seed_database(db=db, dataset=dataset)
    if not result.committed:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=make_error_payload("seed_failed", str(result.error)),
        )
    return {"message": "Database seeded successfully"}
