"""Customer store over HTTP."""

from models import Customer

CUSTOMER = {"name": "A", "contact": "B", "phone": "C"}


def test_create_then_list_on_empty_store(client):
  res = client.post("/api/customers", json=CUSTOMER)
  assert res.status_code == 200
  created = res.json()
  assert created["id"]
  assert created["createdAt"].endswith("Z")
  assert {k: created[k] for k in CUSTOMER} == CUSTOMER

  rows = client.get("/api/customers").json()
  assert rows == [created]


def test_list_newest_first(client, session):
  session.add(Customer(id="old", name="Old", contact="x", phone="1", created_at="2023-01-01T00:00:00.000Z"))
  session.add(Customer(id="new", name="New", contact="y", phone="2", created_at="2024-01-01T00:00:00.000Z"))
  session.commit()

  ids = [c["id"] for c in client.get("/api/customers").json()]
  assert ids == ["new", "old"]


def test_ids_are_unique_across_rapid_creates(client):
  ids = {client.post("/api/customers", json=CUSTOMER).json()["id"] for _ in range(20)}
  assert len(ids) == 20


def test_update_overwrites_mutable_fields(client):
  created = client.post("/api/customers", json=CUSTOMER).json()
  res = client.put(f"/api/customers/{created['id']}", json={"name": "N", "contact": "M", "phone": "P"})
  assert res.status_code == 200
  updated = res.json()
  assert updated == {**created, "name": "N", "contact": "M", "phone": "P"}
  assert client.get("/api/customers").json() == [updated]


def test_update_unknown_customer_is_404(client):
  res = client.put("/api/customers/missing", json=CUSTOMER)
  assert res.status_code == 404
  assert res.json() == {"detail": "Customer not found"}
  assert client.get("/api/customers").json() == []
