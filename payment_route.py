# payment_route.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, update
from sqlmodel import Session, col, select

from db import get_session
from models import (
  UNVERIFIED,
  VERIFIED,
  Payment,
  PaymentCreate,
  PaymentRead,
  PaymentUpdate,
  VerifyRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["payments"])

@router.get("/payments", response_model=List[PaymentRead])
def list_payments(session: Session = Depends(get_session)):
  stmt = select(Payment).order_by(col(Payment.date).desc(), col(Payment.created_at).desc())
  rows = session.exec(stmt).all()
  logger.info("Payments retrieved: %d", len(rows))
  return rows

@router.post("/payments", response_model=PaymentRead)
def create_payment(body: PaymentCreate, session: Session = Depends(get_session)):
  # status is never taken from the client on create
  p = Payment(
    date=body.date,
    customer_id=body.customer_id,
    customer_name=body.customer_name,
    amount=body.amount,
    status=UNVERIFIED,
  )
  logger.info("Adding payment: %s amount=%s", p.id, p.amount)
  session.add(p)
  session.commit()
  session.refresh(p)
  return p

@router.post("/payments/verify")
def verify_payments(body: VerifyRequest, session: Session = Depends(get_session)):
  logger.info("Verifying payments: %s", body.ids)
  if not body.ids:
    return {"success": True}

  # one UPDATE ... WHERE id IN (...); ids that no longer exist are simply not matched
  result = session.exec(
    update(Payment)
    .where(col(Payment.id).in_(list(dict.fromkeys(body.ids))))
    .values(status=VERIFIED, business_date=body.business_date, remarks=body.remarks)
    .execution_options(synchronize_session=False)
  )
  session.commit()
  logger.info("Payments verified: %d", result.rowcount)
  return {"success": True}

@router.put("/payments/{payment_id}", response_model=PaymentRead)
def update_payment(payment_id: str, body: PaymentUpdate, session: Session = Depends(get_session)):
  # Full overwrite. status may be set directly here, outside verify/undo;
  # business_date and remarks are stored exactly as sent.
  logger.info("Updating payment: %s", payment_id)
  p = session.get(Payment, payment_id)
  if not p:
    raise HTTPException(status_code=404, detail="Payment not found")

  p.date = body.date
  p.customer_id = body.customer_id
  p.customer_name = body.customer_name
  p.amount = body.amount
  p.status = body.status
  p.business_date = body.business_date or None
  p.remarks = body.remarks or None
  session.add(p)
  session.commit()
  session.refresh(p)
  return p

@router.delete("/payments/{payment_id}")
def delete_payment(payment_id: str, session: Session = Depends(get_session)):
  logger.info("Deleting payment: %s", payment_id)
  session.exec(
    delete(Payment)
    .where(col(Payment.id) == payment_id)
    .execution_options(synchronize_session=False)
  )
  session.commit()
  return {"success": True}

@router.post("/payments/{payment_id}/undo-verification")
def undo_verification(payment_id: str, session: Session = Depends(get_session)):
  logger.info("Undoing verification: %s", payment_id)
  session.exec(
    update(Payment)
    .where(col(Payment.id) == payment_id)
    .values(status=UNVERIFIED, business_date=None, remarks=None)
    .execution_options(synchronize_session=False)
  )
  session.commit()
  return {"success": True}
