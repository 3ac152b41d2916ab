from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db, ping

router = APIRouter()


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """
    Liveness plus a round trip to the database.
    A database failure is reported as a 500 by the error handlers.
    """
    ping(db)
    return {"status": "ok", "database": "ok"}
