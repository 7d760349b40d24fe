# models.py
import secrets
import time
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic import Field as ApiField
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

UNVERIFIED = "unverified"
VERIFIED = "verified"

PaymentStatus = Literal["unverified", "verified"]

def now_iso() -> str:
  # 2024-01-01T08:00:00.000Z
  return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def new_id(prefix: str) -> str:
  return f"{prefix}{int(time.time() * 1000)}-{secrets.token_hex(4)}"

# tables

class Account(SQLModel, table=True):
  __tablename__ = "accounts"

  id: str = Field(primary_key=True)
  username: str = Field(unique=True, index=True)
  password: str  # bcrypt hash
  created_at: str = Field(default_factory=now_iso)

class Customer(SQLModel, table=True):
  __tablename__ = "customers"

  id: str = Field(default_factory=lambda: new_id("c"), primary_key=True)
  name: str
  contact: str
  phone: str
  created_at: str = Field(default_factory=now_iso)

class Payment(SQLModel, table=True):
  __tablename__ = "payments"

  id: str = Field(default_factory=lambda: new_id("p"), primary_key=True)
  date: str
  customer_id: str = Field(foreign_key="customers.id")
  customer_name: str  # snapshot, not kept in sync with renames
  amount: float
  status: str = UNVERIFIED
  business_date: Optional[str] = None
  remarks: Optional[str] = None
  created_at: str = Field(default_factory=now_iso)

# wire models (camelCase on the wire)

class ApiModel(BaseModel):
  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class LoginRequest(ApiModel):
  username: str
  password: str

class AccountPublic(ApiModel):
  id: str
  username: str

class AccountUpdate(ApiModel):
  username: str
  new_password: str

class CustomerIn(ApiModel):
  name: str
  contact: str
  phone: str

class CustomerRead(ApiModel):
  id: str
  name: str
  contact: str
  phone: str
  created_at: str

class PaymentCreate(ApiModel):
  date: str
  customer_id: str
  customer_name: str
  amount: float

class PaymentUpdate(PaymentCreate):
  status: PaymentStatus
  business_date: Optional[str] = None
  remarks: Optional[str] = None

class PaymentRead(ApiModel):
  id: str
  date: str
  customer_id: str
  customer_name: str
  amount: float
  status: str
  business_date: Optional[str] = None
  remarks: Optional[str] = None
  created_at: str

class VerifyRequest(ApiModel):
  ids: List[str] = ApiField(default_factory=list)
  business_date: str
  remarks: Optional[str] = None
