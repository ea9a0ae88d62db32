from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.database import Database, get_db
from core.exception.exceptions import DatabaseException

router = APIRouter()


@router.get("/health", status_code=200, summary="Estado del servicio")
async def health(db: Database = Depends(get_db)):
    try:
        await db.ping()
    except DatabaseException as e:
        return JSONResponse(status_code=500, content={"ok": False, "error": e.detail})
    return {"ok": True}
