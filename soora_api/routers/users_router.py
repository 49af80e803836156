# soora_api/routers/users_router.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from soora_api.database.session import get_db
from soora_api.models.address_model import Address
from soora_api.models.user_model import User
from soora_api.schemas.common import MessageOut
from soora_api.schemas.users import (
    AddressCreate,
    AddressOut,
    AddressUpdate,
    ProfileOut,
    ProfileUpdate,
    ProfileUpdateOut,
)
from soora_api.services.auth_service import CurrentUser, ensure_owner, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

# columns that may not be written as NULL through a partial update
_REQUIRED_ADDRESS_FIELDS = {"type", "name", "street", "postal_code", "district", "is_default"}


def _get_user(db: Session, current: CurrentUser) -> User:
    user = db.get(User, current.id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _clear_default(db: Session, user_id: str, exclude_id: Optional[str] = None) -> None:
    """Un-default every address of ``user_id`` (except ``exclude_id``). Caller commits."""
    q = db.query(Address).filter(Address.user_id == user_id, Address.is_default == true())
    if exclude_id is not None:
        q = q.filter(Address.id != exclude_id)
    q.update({Address.is_default: False}, synchronize_session=False)


def _get_owned_address(db: Session, address_id: str, current: CurrentUser) -> Address:
    address = db.get(Address, address_id)
    ensure_owner(address.user_id if address else None, current, "Address not found")
    return address


# ---------- Profile ----------

@router.get("/profile", response_model=ProfileOut)
def get_profile(current: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return ProfileOut.model_validate(_get_user(db, current))


@router.put("/profile", response_model=ProfileUpdateOut)
def update_profile(
    body: ProfileUpdate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = _get_user(db, current)
    if body.name is not None:
        user.name = body.name
    if body.phone is not None:
        user.phone = body.phone

    try:
        db.commit()
        db.refresh(user)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update profile for user %s", current.id)
        raise HTTPException(status_code=500, detail="Failed to update profile")
    return ProfileUpdateOut.model_validate(user)


# ---------- Addresses ----------

@router.get("/addresses", response_model=List[AddressOut])
def list_addresses(current: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    addresses = (
        db.query(Address)
        .filter(Address.user_id == current.id)
        .order_by(Address.is_default.desc(), Address.created_at.desc())
        .all()
    )
    return [AddressOut.model_validate(a) for a in addresses]


@router.post("/addresses", response_model=AddressOut, status_code=201)
def create_address(
    body: AddressCreate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    # unset + insert share one transaction
    try:
        if body.is_default:
            _clear_default(db, current.id)
        address = Address(user_id=current.id, **body.model_dump())
        db.add(address)
        db.commit()
        db.refresh(address)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create address for user %s", current.id)
        raise HTTPException(status_code=500, detail="Failed to create address")
    return AddressOut.model_validate(address)


@router.put("/addresses/{address_id}", response_model=AddressOut)
def update_address(
    address_id: str,
    body: AddressUpdate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    address = _get_owned_address(db, address_id, current)

    data = body.model_dump(exclude_unset=True)
    data = {k: v for k, v in data.items() if v is not None or k not in _REQUIRED_ADDRESS_FIELDS}

    try:
        if data.get("is_default"):
            _clear_default(db, current.id, exclude_id=address.id)
        for field, value in data.items():
            setattr(address, field, value)
        db.commit()
        db.refresh(address)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update address %s", address_id)
        raise HTTPException(status_code=500, detail="Failed to update address")
    return AddressOut.model_validate(address)


@router.delete("/addresses/{address_id}", response_model=MessageOut)
def delete_address(
    address_id: str,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    address = _get_owned_address(db, address_id, current)
    try:
        db.delete(address)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete address %s", address_id)
        raise HTTPException(status_code=500, detail="Failed to delete address")
    return MessageOut(message="Address deleted")
