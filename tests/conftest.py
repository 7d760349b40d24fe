"""Shared fixtures: an isolated in-memory database per test, wired into the app."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from db import get_session
from main import app
from seed import seed_defaults


@pytest.fixture
def engine():
  engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
  )
  SQLModel.metadata.create_all(engine)
  yield engine
  engine.dispose()


@pytest.fixture
def session(engine):
  with Session(engine) as session:
    yield session


@pytest.fixture
def client(engine):
  def override_get_session():
    with Session(engine) as session:
      yield session

  app.dependency_overrides[get_session] = override_get_session
  yield TestClient(app)
  app.dependency_overrides.clear()


@pytest.fixture
def seeded(session):
  seed_defaults(session)
  return session
