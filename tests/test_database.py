import sqlite3

from sqlalchemy import create_engine, inspect, select
from sqlalchemy.orm import Session

from hub import logic
from hub.database import configure_sqlite, init_db, reset_db
from hub.models import Server
from hub.sample_data import SAMPLE_SERVERS

LEGACY_SCHEMA = """
CREATE TABLE servers (
  id TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  host TEXT NOT NULL,
  description TEXT
);
CREATE TABLE services (
  id TEXT PRIMARY KEY,
  server_id TEXT NOT NULL,
  name TEXT NOT NULL,
  description TEXT,
  ports TEXT NOT NULL,
  icon TEXT,
  color TEXT,
  protocol TEXT DEFAULT 'http',
  tags TEXT,
  FOREIGN KEY (server_id) REFERENCES servers(id) ON DELETE CASCADE
);
"""


def _legacy_engine(tmp_path):
    db_file = tmp_path / "servers.db"
    conn = sqlite3.connect(db_file)
    conn.executescript(LEGACY_SCHEMA)
    conn.execute("INSERT INTO servers VALUES ('server-1', 'Media Server', '192.168.1.100', NULL)")
    conn.execute(
        "INSERT INTO services (id, server_id, name, ports, protocol, tags) "
        "VALUES ('svc-1', 'server-1', 'Plex', '[32400]', 'http', '[\"media\"]')"
    )
    conn.commit()
    conn.close()
    return configure_sqlite(create_engine(f"sqlite:///{db_file}"))


def test_init_db_adds_missing_service_columns(tmp_path):
    engine = _legacy_engine(tmp_path)

    init_db(bind=engine, seed=False)

    columns = {col["name"] for col in inspect(engine).get_columns("services")}
    for column in ("image", "healthcheck_url", "healthcheck_expected_status", "healthcheck_enabled", "public_url"):
        assert column in columns
    engine.dispose()


def test_migration_preserves_existing_rows(tmp_path):
    engine = _legacy_engine(tmp_path)
    init_db(bind=engine, seed=False)

    with Session(engine) as db:
        service = logic.get_service(db, "svc-1")
        data = logic.serialize_service(service)
    assert data["ports"] == [32400]
    assert data["tags"] == ["media"]
    assert data["healthcheck_enabled"] is False
    assert data["image"] is None
    engine.dispose()


def test_init_db_is_idempotent(tmp_path):
    engine = _legacy_engine(tmp_path)
    init_db(bind=engine, seed=False)
    init_db(bind=engine, seed=False)
    columns = [col["name"] for col in inspect(engine).get_columns("services")]
    assert columns.count("public_url") == 1
    engine.dispose()


def test_seed_sample_data_only_when_empty(tmp_path):
    engine = configure_sqlite(create_engine(f"sqlite:///{tmp_path / 'seed.db'}"))
    init_db(bind=engine, seed=True)
    init_db(bind=engine, seed=True)

    with Session(engine) as db:
        servers = db.scalars(select(Server)).all()
        assert len(servers) == len(SAMPLE_SERVERS)
        media = logic.get_server(db, "server-1")
        assert sorted(s.name for s in media.services) == ["Apache Web Server", "Plex Media Server"]
    engine.dispose()


def test_reset_db_empties_tables(tmp_path):
    engine = configure_sqlite(create_engine(f"sqlite:///{tmp_path / 'reset.db'}"))
    init_db(bind=engine, seed=True)
    reset_db(bind=engine)

    with Session(engine) as db:
        assert db.scalars(select(Server)).all() == []
    engine.dispose()
