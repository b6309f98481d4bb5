"""SQLite file behind the preference store.

The database lives wherever ``--db`` (or the API's ``DB_PATH``) points; the
directory is created on first use. Schema changes are plain modules named
``v###_*.py`` under ``migrations/``, each with an ``up(conn)`` function.
"""

import importlib
import sqlite3
from pathlib import Path

MIGRATIONS_PACKAGE = "weatherrun.storage.migrations"
MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open the preferences database, creating its directory if needed."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    # CLI and API processes may share one file
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Bring the schema up to date. Returns the names applied by this call."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    conn.commit()

    done = applied_migrations(conn)
    pending = [name for name in _discover_migrations() if name not in done]
    for name in pending:
        importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}").up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()
    return pending


def applied_migrations(conn: sqlite3.Connection) -> set[str]:
    rows = conn.execute("SELECT version FROM schema_versions").fetchall()
    return {row["version"] for row in rows}


def _discover_migrations() -> list[str]:
    return sorted(p.stem for p in MIGRATIONS_DIR.glob("v[0-9]*_*.py"))
