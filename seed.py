"""
seed.py
Idempotent first-boot data: the shared account plus a few example customers
and payments. Every insert is guarded by an existence check, so running it on
every startup is safe.
"""

import logging
import os

from sqlmodel import Session, select

from auth_route import ACCOUNT_ID
from models import UNVERIFIED, VERIFIED, Account, Customer, Payment
from security import hash_password

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = os.getenv("DEFAULT_USERNAME", "dayou").strip()
DEFAULT_PASSWORD = os.getenv("DEFAULT_PASSWORD", "Dayou123?")

EXAMPLE_CUSTOMERS = [
  {"id": "c1", "name": "上海宏泰塑胶有限公司", "contact": "王经理", "phone": "138-0000-1111"},
  {"id": "c2", "name": "深圳飞龙模具制造厂", "contact": "李主管", "phone": "139-2222-3333"},
  {"id": "c3", "name": "大友硅胶工艺制品部", "contact": "刘工", "phone": "137-4444-5555"},
]

EXAMPLE_PAYMENTS = [
  {"id": "p1", "date": "2023-10-12", "customer_id": "c1", "customer_name": "上海宏泰塑胶有限公司",
   "amount": 45000, "status": VERIFIED, "business_date": "2023-10-15", "remarks": "月结款项"},
  {"id": "p2", "date": "2023-11-05", "customer_id": "c2", "customer_name": "深圳飞龙模具制造厂",
   "amount": 12800, "status": UNVERIFIED},
  {"id": "p3", "date": "2023-11-20", "customer_id": "c1", "customer_name": "上海宏泰塑胶有限公司",
   "amount": 3500, "status": UNVERIFIED},
  {"id": "p4", "date": "2023-12-01", "customer_id": "c3", "customer_name": "大友硅胶工艺制品部",
   "amount": 220000, "status": UNVERIFIED},
]

def seed_account(session: Session) -> bool:
  exists = session.exec(select(Account).where(Account.username == DEFAULT_USERNAME)).first()
  if exists or session.get(Account, ACCOUNT_ID):
    return False
  session.add(Account(id=ACCOUNT_ID, username=DEFAULT_USERNAME, password=hash_password(DEFAULT_PASSWORD)))
  session.commit()
  logger.info("Default account created")
  return True

def seed_customers(session: Session) -> int:
  added = 0
  for data in EXAMPLE_CUSTOMERS:
    if session.get(Customer, data["id"]):
      continue
    session.add(Customer(**data))
    added += 1
  session.commit()
  return added

def seed_payments(session: Session) -> int:
  added = 0
  for data in EXAMPLE_PAYMENTS:
    if session.get(Payment, data["id"]):
      continue
    session.add(Payment(**data))
    added += 1
  session.commit()
  return added

def seed_defaults(session: Session, examples: bool = True) -> None:
  seed_account(session)
  if not examples:
    return
  customers = seed_customers(session)
  payments = seed_payments(session)
  logger.info("Seeded %d customers, %d payments", customers, payments)
