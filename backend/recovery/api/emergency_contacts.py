from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from recovery.api.deps import get_user_id
from recovery.core.constants import CRISIS_HOTLINES
from recovery.db import get_db
from recovery.models.emergency_contact import EmergencyContact
from recovery.schemas.emergency_contact import ContactCreate, ContactRead, ContactUpdate, CrisisHotline


router = APIRouter(prefix="/contacts", tags=["contacts"])


def _get_owned(db: Session, contact_id: int, user_id: str) -> EmergencyContact:
    row = (
        db.query(EmergencyContact)
        .filter(EmergencyContact.id == contact_id, EmergencyContact.user_id == user_id)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Contact not found")
    return row


@router.get("/hotlines", response_model=list[CrisisHotline])
def list_crisis_hotlines():
    """National crisis lines, shown to every user."""
    return CRISIS_HOTLINES


@router.get("/", response_model=list[ContactRead])
def list_contacts(
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    # most critical first, then in the order they were added
    return (
        db.query(EmergencyContact)
        .filter(EmergencyContact.user_id == user_id)
        .order_by(EmergencyContact.priority_level, EmergencyContact.created_at, EmergencyContact.id)
        .all()
    )


@router.post("/", response_model=ContactRead)
def create_contact(
    payload: ContactCreate,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    row = EmergencyContact(
        user_id=user_id,
        name=payload.name.strip(),
        phone=payload.phone,
        relationship=payload.relationship,
        priority_level=payload.priority_level,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.put("/{contact_id}", response_model=ContactRead)
def update_contact(
    contact_id: int,
    payload: ContactUpdate,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    row = _get_owned(db, contact_id, user_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if field in ("name", "phone", "priority_level") and value is None:
            raise HTTPException(status_code=422, detail=f"{field} cannot be null")
        setattr(row, field, value.strip() if field == "name" else value)
    db.commit()
    db.refresh(row)
    return row


@router.delete("/{contact_id}")
def delete_contact(
    contact_id: int,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    row = _get_owned(db, contact_id, user_id)
    db.delete(row)
    db.commit()
    return {"message": "Contact deleted"}
