"""Recommendation pipeline: preferences, fetch, score, persist."""

import logging
from datetime import datetime

from weatherrun.advice.labels import format_run_time
from weatherrun.config.schema import AppConfig
from weatherrun.ingest.forecast_parser import parse_forecast
from weatherrun.ingest.visual_crossing_client import VisualCrossingClient, WeatherApiError
from weatherrun.models.common import local_now
from weatherrun.models.recommendation import RunPreferences, RunReport
from weatherrun.planner.run_planner import select_and_score
from weatherrun.storage import preferences_repo
from weatherrun.storage.database import connect, run_migrations

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to load weather data."


def default_preferences(config: AppConfig) -> RunPreferences:
    d = config.defaults
    return RunPreferences(location=d.location, run_hour=d.hour, run_minute=d.minute)


class RecommendPipeline:
    def __init__(
        self,
        config: AppConfig,
        db_path: str = "data/weatherrun.db",
        client: VisualCrossingClient | None = None,
    ):
        self.config = config
        self.db_path = db_path
        self.client = client or VisualCrossingClient(
            api_key=config.provider.api_key,
            base_url=config.provider.base_url,
            timeout=config.provider.timeout_seconds,
        )

    def run(
        self,
        location: str | None = None,
        hour: int | None = None,
        minute: int | None = None,
        now: datetime | None = None,
    ) -> RunReport:
        """Produce a run report for a location and run time.

        Unspecified arguments come from stored preferences, then defaults.
        Preferences are saved only after a successful fetch.
        """
        if now is None:
            now = local_now()

        conn = connect(self.db_path)
        try:
            run_migrations(conn)
            stored = preferences_repo.load_preferences(
                conn, default_preferences(self.config)
            )
            prefs = RunPreferences(
                location=(location if location is not None else stored.location).strip(),
                run_hour=hour if hour is not None else stored.run_hour,
                run_minute=minute if minute is not None else stored.run_minute,
            )

            if not prefs.location:
                return self._failed(prefs, "Enter a location to find your best run day.")

            try:
                raw = self.client.get_timeline(prefs.location)
                forecast = parse_forecast(raw)
                days = select_and_score(
                    forecast,
                    prefs.run_hour,
                    prefs.run_minute,
                    now,
                    window_days=self.config.planner.window_days,
                    ideal_feelslike=self.config.planner.ideal_feelslike_f,
                    precip_weight=self.config.planner.precip_weight,
                )
            except WeatherApiError as e:
                logger.warning("Forecast fetch failed for %r: %s", prefs.location, e)
                return self._failed(prefs, str(e), e.status_code)
            except Exception:
                logger.exception("Forecast processing failed for %r", prefs.location)
                return self._failed(prefs, GENERIC_ERROR)

            preferences_repo.save_preferences(conn, prefs)

            report = RunReport(
                location=prefs.location,
                resolved_address=forecast.resolved_address,
                run_hour=prefs.run_hour,
                run_minute=prefs.run_minute,
                days=tuple(days),
                alerts=forecast.alerts,
            )
            top = report.top_pick
            logger.info(
                "%s at %s: %d run days, top pick %s",
                report.resolved_address,
                format_run_time(prefs.run_hour, prefs.run_minute),
                len(report.days),
                top.date if top else "none",
            )
            return report
        finally:
            conn.close()

    def _failed(
        self, prefs: RunPreferences, message: str, status_code: int | None = None
    ) -> RunReport:
        return RunReport(
            location=prefs.location,
            resolved_address="",
            run_hour=prefs.run_hour,
            run_minute=prefs.run_minute,
            error=message,
            error_status=status_code,
        )
