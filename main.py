# main.py
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

import db
from auth_route import router as auth_router
from customer_route import router as customer_router
from payment_route import router as payment_router
from seed import seed_defaults

load_dotenv()

PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
SEED_EXAMPLES = os.getenv("SEED_EXAMPLES", "1").strip().lower() not in ("0", "false", "no")
CORS_ORIGINS = [
  x.strip()
  for x in os.getenv("CORS_ORIGINS", "*").split(",")
  if x.strip()
]

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
  db.init_db()
  with Session(db.engine) as session:
    seed_defaults(session, examples=SEED_EXAMPLES)
  logger.info("Database ready: %s", db.engine.url.render_as_string(hide_password=True))
  yield

app = FastAPI(title="Collections Ledger Backend", version="1.0.0", lifespan=lifespan)
app.add_middleware(
  CORSMiddleware,
  allow_origins=CORS_ORIGINS,
  allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
  allow_headers=["Content-Type"],
)

app.include_router(auth_router)
app.include_router(customer_router)
app.include_router(payment_router)

@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
  logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
  return JSONResponse(status_code=500, content={"detail": "Database error"})

@app.get("/health")
def health():
  return {"status": "ok"}

if __name__ == "__main__":
  uvicorn.run(app, host="0.0.0.0", port=PORT)
