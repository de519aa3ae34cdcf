from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceAnalyticsService
from .core.constants import DEFAULT_AT_RISK_THRESHOLD
from .database.connection import DBConfig, DatabaseConnection
from .insights.client import InsightsClient
from .insights.gemini_client import GeminiInsightsClient
from .insights.service import InsightsService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    insights_client: InsightsClient

    analytics_service: AttendanceAnalyticsService
    insights_service: InsightsService


def wire(
    *,
    attendance_repo: AttendanceRepository,
    insights_client: InsightsClient,
    at_risk_threshold: float = DEFAULT_AT_RISK_THRESHOLD,
) -> Container:
    analytics_service = AttendanceAnalyticsService(attendance_repo, at_risk_threshold=at_risk_threshold)
    insights_service = InsightsService(insights_client, analytics_service, at_risk_threshold=at_risk_threshold)
    return Container(
        attendance_repo=attendance_repo,
        insights_client=insights_client,
        analytics_service=analytics_service,
        insights_service=insights_service,
    )


def build_container(*, db_config: dict, settings=None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    insights_client = GeminiInsightsClient(
        api_key=str(getattr(settings, "GEMINI_API_KEY", "") or ""),
        model=str(getattr(settings, "GEMINI_MODEL", "gemini-2.5-flash")),
        timeout=float(getattr(settings, "LLM_TIMEOUT", 25.0)),
    )
    return wire(
        attendance_repo=MySQLAttendanceRepository(conn),
        insights_client=insights_client,
        at_risk_threshold=float(getattr(settings, "AT_RISK_THRESHOLD", DEFAULT_AT_RISK_THRESHOLD)),
    )
