import sqlalchemy
from sqlalchemy import inspect

from votehub import database as app_db
from votehub.main import app
from votehub.routers.system import get_seed_dataset
from votehub.seed import SeedDataset


def test_init_db_creates_tables(test_engine):
    app_db.Base.metadata.drop_all(bind=test_engine)

    original_engine = app_db.engine
    app_db.engine = test_engine
    try:
        app_db.init_db()

        tables = inspect(test_engine).get_table_names()
        for name in ("shareholders", "questions", "choices", "answers", "users", "customers", "invoices", "revenue"):
            assert name in tables
    finally:
        app_db.engine = original_engine


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_seed_endpoint_seeds_and_is_idempotent(client, db_session):
    r1 = client.get("/api/seed")
    assert r1.status_code == 200
    assert r1.json() == {"message": "Database seeded successfully"}

    shareholders = db_session.execute(sqlalchemy.text("SELECT COUNT(*) FROM shareholders")).scalar()
    revenue = db_session.execute(sqlalchemy.text("SELECT COUNT(*) FROM revenue")).scalar()
    assert shareholders > 0
    assert revenue == 12

    r2 = client.get("/api/seed")
    assert r2.status_code == 200
    assert r2.json() == {"message": "Database seeded successfully"}

    assert db_session.execute(sqlalchemy.text("SELECT COUNT(*) FROM shareholders")).scalar() == shareholders
    assert db_session.execute(sqlalchemy.text("SELECT COUNT(*) FROM revenue")).scalar() == revenue


def test_seed_endpoint_reports_failure_with_500(client, db_session):
    broken = SeedDataset.demo()
    broken.questions = [{"id": "q-broken", "question": None, "is_active": 1}]
    app.dependency_overrides[get_seed_dataset] = lambda: broken
    try:
        r = client.get("/api/seed")
    finally:
        app.dependency_overrides.pop(get_seed_dataset, None)

    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "seed_failed"
    assert "NOT NULL" in body["error"]["message"]
    assert "message" not in body

    # The shareholders step ran before the failure and was rolled back too
    assert db_session.execute(sqlalchemy.text("SELECT COUNT(*) FROM shareholders")).scalar() == 0


def test_seed_endpoint_rejects_post(client):
    r = client.post("/api/seed")
    assert r.status_code == 405
