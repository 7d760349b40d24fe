# auth_route.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from db import get_session
from models import Account, AccountPublic, AccountUpdate, LoginRequest
from security import hash_password, verify_password

logger = logging.getLogger(__name__)

ACCOUNT_ID = "acc1"
INVALID_CREDENTIALS = "Invalid username or password"

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/login", response_model=AccountPublic)
def login(body: LoginRequest, session: Session = Depends(get_session)):
  logger.info("Login attempt: %s", body.username)
  account = session.exec(select(Account).where(Account.username == body.username)).first()
  # same answer for unknown user and wrong password
  if not account or not verify_password(body.password, account.password):
    logger.info("Login rejected: %s", body.username)
    raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)

  logger.info("Login successful: %s", account.username)
  return {"id": account.id, "username": account.username}

@router.put("/account")
def update_account(body: AccountUpdate, session: Session = Depends(get_session)):
  # No re-authentication: whoever can reach this endpoint replaces the credentials.
  logger.info("Update account: %s", body.username)
  account = session.get(Account, ACCOUNT_ID)
  if account:
    account.username = body.username
    account.password = hash_password(body.new_password)
    session.add(account)
    session.commit()
  else:
    logger.warning("Account %s missing, nothing updated", ACCOUNT_ID)
  return {"username": body.username}
