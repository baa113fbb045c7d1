"""Backup endpoints - export and import of the ledger state."""
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from worklog.database import get_database
from worklog.models.backup import BackupDocument
from worklog.services.backup_service import BackupService, backup_filename
from worklog.utils.clock import get_now


router = APIRouter(prefix="/backup", tags=["backup"])


@router.get("/export")
async def export_backup(
    db=Depends(get_database),
    now: datetime = Depends(get_now),
):
    """
    Download all entries and settings as one JSON document.

    - Filename embeds the export date
    """
    document = BackupService(db).export_state()
    filename = backup_filename(now.date())
    return JSONResponse(
        content=document.to_record(),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=BackupDocument)
async def import_backup(
    document: Any = Body(...),
    db=Depends(get_database),
):
    """
    Replace all entries and settings with a backup document.

    - Document must have both 'entries' and 'settings'
    - Existing state is untouched when the document is rejected
    """
    service = BackupService(db)
    try:
        return service.import_state(document)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
