# customer_route.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, col, select

from db import get_session
from models import Customer, CustomerIn, CustomerRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["customers"])

@router.get("/customers", response_model=List[CustomerRead])
def list_customers(session: Session = Depends(get_session)):
  rows = session.exec(select(Customer).order_by(col(Customer.created_at).desc())).all()
  logger.info("Customers retrieved: %d", len(rows))
  return rows

@router.post("/customers", response_model=CustomerRead)
def create_customer(body: CustomerIn, session: Session = Depends(get_session)):
  c = Customer(name=body.name, contact=body.contact, phone=body.phone)
  logger.info("Adding customer: %s", c.name)
  session.add(c)
  session.commit()
  session.refresh(c)
  logger.info("Customer added: %s", c.id)
  return c

@router.put("/customers/{customer_id}", response_model=CustomerRead)
def update_customer(customer_id: str, body: CustomerIn, session: Session = Depends(get_session)):
  logger.info("Updating customer: %s", customer_id)
  c = session.get(Customer, customer_id)
  if not c:
    raise HTTPException(status_code=404, detail="Customer not found")

  c.name = body.name
  c.contact = body.contact
  c.phone = body.phone
  session.add(c)
  session.commit()
  session.refresh(c)
  return c
