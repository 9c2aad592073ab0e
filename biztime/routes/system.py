from fastapi import APIRouter, Depends

from biztime.core.db import QueryGateway, get_db

router = APIRouter()


@router.get("/health")
def health(db: QueryGateway = Depends(get_db)):
    db.execute("SELECT 1")
    return {"status": "ok", "database": "ok"}
