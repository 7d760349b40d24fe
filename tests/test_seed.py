"""First-boot seeding is idempotent."""

from sqlmodel import select

from models import Account, Customer, Payment
from seed import seed_defaults


def _counts(session):
  return (
    len(session.exec(select(Account)).all()),
    len(session.exec(select(Customer)).all()),
    len(session.exec(select(Payment)).all()),
  )


def test_seed_twice(session):
  seed_defaults(session)
  seed_defaults(session)
  assert _counts(session) == (1, 3, 4)


def test_seed_without_examples(session):
  seed_defaults(session, examples=False)
  assert _counts(session) == (1, 0, 0)


def test_seeded_payment_states(session):
  seed_defaults(session)
  p1 = session.get(Payment, "p1")
  assert p1.status == "verified"
  assert p1.business_date == "2023-10-15"
  for pid in ("p2", "p3", "p4"):
    p = session.get(Payment, pid)
    assert p.status == "unverified"
    assert p.business_date is None
    assert p.remarks is None


def test_seed_keeps_renamed_account(client, seeded):
  client.put("/api/auth/account", json={"username": "boss", "newPassword": "pw"})
  seed_defaults(seeded)
  seeded.expire_all()
  accounts = seeded.exec(select(Account)).all()
  assert [a.username for a in accounts] == ["boss"]


def test_seeded_lists(client, seeded):
  payments = client.get("/api/payments").json()
  assert [p["id"] for p in payments] == ["p4", "p3", "p2", "p1"]
  assert len(client.get("/api/customers").json()) == 3
