"""Entry endpoints - logged work intervals."""
from fastapi import APIRouter, Depends, HTTPException, status

from worklog.database import get_database
from worklog.models.time_entry import WorkEntry, WorkEntryCreate, new_entry_id
from worklog.services.entry_service import EntryService


router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("", response_model=list[WorkEntry])
async def list_entries(db=Depends(get_database)):
    """
    List all entries.

    - Results sorted by start descending (most recent first)
    """
    service = EntryService(db)
    return service.list_entries()


@router.post("", response_model=WorkEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(
    entry_create: WorkEntryCreate,
    db=Depends(get_database),
):
    """
    Create a manual entry, or replace one when its id is known.

    - End is required and must not precede start
    """
    service = EntryService(db)
    entry = WorkEntry(
        id=entry_create.id or new_entry_id(),
        start=entry_create.start,
        end=entry_create.end,
        notes=entry_create.notes,
    )
    try:
        return service.save_entry(entry)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{entry_id}", response_model=WorkEntry)
async def get_entry(entry_id: str, db=Depends(get_database)):
    """Get a specific entry by ID."""
    service = EntryService(db)
    entry = service.get_entry(entry_id)

    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")

    return entry


@router.put("/{entry_id}", response_model=WorkEntry)
async def replace_entry(
    entry_id: str,
    entry_create: WorkEntryCreate,
    db=Depends(get_database),
):
    """
    Replace an entry with a complete new record.

    - The path id wins over any id in the body
    """
    service = EntryService(db)
    entry = WorkEntry(
        id=entry_id,
        start=entry_create.start,
        end=entry_create.end,
        notes=entry_create.notes,
    )
    try:
        return service.save_entry(entry)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{entry_id}")
async def delete_entry(entry_id: str, db=Depends(get_database)):
    """
    Delete an entry.

    - Deleting an unknown id is not an error
    """
    service = EntryService(db)
    deleted = service.delete_entry(entry_id)
    return {"deleted_count": 1 if deleted else 0}
