"""Run-day planner JSON API (FastAPI) for browser and share-sheet clients."""

from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from weatherrun.advice.labels import format_run_time
from weatherrun.config.loader import load_config
from weatherrun.models.recommendation import RunPreferences, RunReport
from weatherrun.pipeline.recommend_pipeline import RecommendPipeline, default_preferences
from weatherrun.reporting.formatters import format_share_text, report_to_dict
from weatherrun.storage import preferences_repo
from weatherrun.storage.database import connect, run_migrations

DB_PATH = Path(__file__).parent.parent / "data" / "weatherrun.db"
CONFIG_PATH = Path(__file__).parent.parent / "configs" / "default.yaml"

app = FastAPI(title="WeatherRun", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class PreferencesBody(BaseModel):
    location: str
    run_hour: int = Field(ge=0, le=23)
    run_minute: int = Field(ge=0, le=59)


def _pipeline() -> RecommendPipeline:
    return RecommendPipeline(load_config(CONFIG_PATH), str(DB_PATH))


def _error_status(report: RunReport) -> int:
    if not report.location:
        return 400
    if report.error_status == 400:
        # provider rejected the location
        return 404
    return 502


# ── Run days ────────────────────────────────────────────────────


@app.get("/api/runs")
def get_runs(
    location: str | None = None,
    hour: int | None = Query(default=None, ge=0, le=23),
    minute: int | None = Query(default=None, ge=0, le=59),
):
    """Scored run days for a location and run time (stored preferences by default)."""
    report = _pipeline().run(location=location, hour=hour, minute=minute)
    if report.error:
        raise HTTPException(_error_status(report), report.error)
    data = report_to_dict(report)
    data["share"] = [format_share_text(report, d) for d in report.days]
    return data


# ── Preferences ─────────────────────────────────────────────────


@app.get("/api/preferences")
def get_preferences():
    conn = connect(DB_PATH)
    try:
        run_migrations(conn)
        prefs = preferences_repo.load_preferences(
            conn, default_preferences(load_config(CONFIG_PATH))
        )
        return {
            "location": prefs.location,
            "run_hour": prefs.run_hour,
            "run_minute": prefs.run_minute,
            "run_time": format_run_time(prefs.run_hour, prefs.run_minute),
        }
    finally:
        conn.close()


@app.put("/api/preferences")
def put_preferences(body: PreferencesBody):
    conn = connect(DB_PATH)
    try:
        run_migrations(conn)
        preferences_repo.save_preferences(
            conn,
            RunPreferences(
                location=body.location.strip(),
                run_hour=body.run_hour,
                run_minute=body.run_minute,
            ),
        )
        return {"ok": True}
    finally:
        conn.close()
