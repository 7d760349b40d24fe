# db.py
import os
from dotenv import load_dotenv
from sqlmodel import SQLModel, create_engine, Session

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./data.db"

def database_url() -> str:
  # unset or blank both mean the local SQLite file
  return os.getenv("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL

DATABASE_URL = database_url()

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=False, pool_pre_ping=True, connect_args=connect_args)

def init_db() -> None:
  SQLModel.metadata.create_all(engine)

def get_session():
  with Session(engine) as session:
    yield session
