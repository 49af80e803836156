# soora_api/schemas/users.py
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, constr

from soora_api.models.enums import AddressType, UserRole, UserTier
from soora_api.schemas.common import CamelModel, Pagination

Phone = constr(strip_whitespace=True, min_length=6, max_length=32)
PostalCode = constr(strip_whitespace=True, pattern=r"^\d{6}$")
Text255 = constr(strip_whitespace=True, min_length=1, max_length=255)


# ---------- Profile ----------

class ProfileOut(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    tier: UserTier
    date_of_birth: Optional[date] = None
    age_verified: bool
    email_verified: bool
    created_at: datetime


class ProfileUpdate(CamelModel):
    name: Optional[Text255] = None
    phone: Optional[Phone] = None


class ProfileUpdateOut(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    tier: UserTier


# ---------- Addresses ----------

class AddressCreate(CamelModel):
    type: AddressType = AddressType.HOME
    name: Text255
    street: Text255
    unit: Optional[str] = Field(default=None, max_length=32)
    building: Optional[str] = Field(default=None, max_length=255)
    postal_code: PostalCode
    district: Text255
    is_default: bool = False
    delivery_notes: Optional[str] = Field(default=None, max_length=1000)


class AddressUpdate(CamelModel):
    type: Optional[AddressType] = None
    name: Optional[Text255] = None
    street: Optional[Text255] = None
    unit: Optional[str] = Field(default=None, max_length=32)
    building: Optional[str] = Field(default=None, max_length=255)
    postal_code: Optional[PostalCode] = None
    district: Optional[Text255] = None
    is_default: Optional[bool] = None
    delivery_notes: Optional[str] = Field(default=None, max_length=1000)


class AddressOut(CamelModel):
    id: str
    user_id: str
    type: AddressType
    name: str
    street: str
    unit: Optional[str] = None
    building: Optional[str] = None
    postal_code: str
    district: str
    is_default: bool
    delivery_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# ---------- Admin projections ----------

class AdminUserOut(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    tier: UserTier
    is_active: bool
    created_at: datetime
    order_count: int = 0


class AdminUserListOut(CamelModel):
    users: List[AdminUserOut]
    pagination: Pagination


class TierUpdate(CamelModel):
    tier: UserTier


class TierUpdateOut(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    tier: UserTier
