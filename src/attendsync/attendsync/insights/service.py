from __future__ import annotations

import json
import logging
from typing import Iterable, Sequence

from ..attendance import aggregator
from ..attendance.model import AttendanceEvent
from ..attendance.ranker import at_risk_students
from ..attendance.service import AttendanceAnalyticsService
from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEFAULT_AT_RISK_THRESHOLD
from ..core.enums import AnalysisType, ReportFormat, VisualizationType
from ..core.exceptions import InsightsError, ValidationError
from .client import InsightsClient
from .model import InsightsReport, InsightsRequest
from .prompt import SYSTEM_PROMPT, render_user_prompt

logger = logging.getLogger(__name__)


def attendance_payload(
    events: Sequence[AttendanceEvent],
    *,
    analysis_type: AnalysisType,
    target_id: str,
    at_risk_threshold: float = DEFAULT_AT_RISK_THRESHOLD,
) -> str:
    """Aggregate ``events`` into the JSON document handed to the model."""

    subjects = aggregator.subject_stats(events, per_student=True)
    payload = {
        "analysis_type": analysis_type.value,
        "target_id": target_id,
        "summary": aggregator.summarize_subjects(subjects).to_dict(),
        "subjects": [s.to_dict() for s in subjects],
        "monthly": [m.as_chart_point() for m in aggregator.monthly_stats(events, per_student=True)],
        "at_risk_students": [
            s.to_dict() for s in at_risk_students(aggregator.student_stats(events), threshold=at_risk_threshold)
        ],
    }
    return json.dumps(payload, ensure_ascii=False)


class InsightsService:
    def __init__(
        self,
        client: InsightsClient,
        analytics: AttendanceAnalyticsService,
        *,
        at_risk_threshold: float = DEFAULT_AT_RISK_THRESHOLD,
    ):
        self._client = client
        self._analytics = analytics
        self._threshold = float(at_risk_threshold)

    def build_request(
        self,
        *,
        analysis_type: str,
        target_id: str,
        report_format: str,
        visualization_types: Iterable[str],
        events: Sequence[AttendanceEvent],
    ) -> InsightsRequest:
        kind = require_choice(analysis_type, AnalysisType, "analysisType")
        target_id = require_non_empty(target_id, "targetId")
        fmt = require_choice(report_format, ReportFormat, "reportFormat")
        visuals = tuple(require_choice(v, VisualizationType, "visualizationTypes") for v in visualization_types or ())
        if not visuals:
            raise ValidationError("You have to select at least one visualization type.")

        return InsightsRequest(
            attendance_data=attendance_payload(
                events, analysis_type=kind, target_id=target_id, at_risk_threshold=self._threshold
            ),
            analysis_preferences=f"Focus on {kind.value} {target_id}",
            report_format=fmt,
            visualization_types=visuals,
            analysis_type=kind,
            target_id=target_id,
        )

    def generate(self, request: InsightsRequest) -> InsightsReport:
        output = self._client.generate_json(SYSTEM_PROMPT, render_user_prompt(request))

        report = output.get("report")
        insights = output.get("insights")
        visualizations = output.get("visualizations", [])
        if not isinstance(report, str) or not isinstance(insights, str):
            raise InsightsError("Insights model answer is missing report or insights")
        if not isinstance(visualizations, list) or not all(isinstance(v, str) for v in visualizations):
            raise InsightsError("Insights model answer has malformed visualizations")

        logger.info(
            "Generated %s insights for %s %s", request.report_format.value, request.analysis_type.value, request.target_id
        )
        return InsightsReport(report=report, insights=insights, visualizations=visualizations)

    def generate_for(
        self,
        *,
        analysis_type: str,
        target_id: str,
        report_format: str,
        visualization_types: Iterable[str],
    ) -> InsightsReport:
        """Fetch the target's snapshot, aggregate it and run the model."""

        kind = require_choice(analysis_type, AnalysisType, "analysisType")
        fetch = {
            AnalysisType.CLASS: self._analytics.class_events,
            AnalysisType.STUDENT: self._analytics.student_events,
            AnalysisType.FACULTY: self._analytics.faculty_events,
        }[kind]
        events = fetch(target_id)
        request = self.build_request(
            analysis_type=kind.value,
            target_id=target_id,
            report_format=report_format,
            visualization_types=visualization_types,
            events=events,
        )
        return self.generate(request)
