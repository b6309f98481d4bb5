"""Repository for persisted run preferences (location and run time)."""

import logging
import sqlite3

from weatherrun.models.recommendation import RunPreferences

logger = logging.getLogger(__name__)

KEY_LOCATION = "location"
KEY_RUN_HOUR = "run_hour"
KEY_RUN_MINUTE = "run_minute"


def get_preference(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM preferences WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_preference(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Upsert a preference value. Last write wins."""
    conn.execute(
        "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def load_preferences(
    conn: sqlite3.Connection, defaults: RunPreferences
) -> RunPreferences:
    """Restore stored preferences, using defaults for absent or unreadable values."""
    location = get_preference(conn, KEY_LOCATION)
    return RunPreferences(
        location=location if location is not None else defaults.location,
        run_hour=_stored_int(conn, KEY_RUN_HOUR, defaults.run_hour, 23),
        run_minute=_stored_int(conn, KEY_RUN_MINUTE, defaults.run_minute, 59),
    )


def save_preferences(conn: sqlite3.Connection, prefs: RunPreferences) -> None:
    set_preference(conn, KEY_LOCATION, prefs.location)
    set_preference(conn, KEY_RUN_HOUR, str(prefs.run_hour))
    set_preference(conn, KEY_RUN_MINUTE, str(prefs.run_minute))


def _stored_int(conn: sqlite3.Connection, key: str, default: int, upper: int) -> int:
    raw = get_preference(conn, key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring unreadable preference %s=%r", key, raw)
        return default
    if not 0 <= value <= upper:
        logger.warning("Ignoring out-of-range preference %s=%r", key, raw)
        return default
    return value
