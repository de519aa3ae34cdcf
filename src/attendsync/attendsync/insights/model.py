from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import AnalysisType, ReportFormat, VisualizationType


@dataclass(frozen=True)
class InsightsRequest:
    """Input of the attendance insights prompt."""

    attendance_data: str
    analysis_preferences: str
    report_format: ReportFormat
    visualization_types: tuple[VisualizationType, ...]
    analysis_type: AnalysisType = AnalysisType.CLASS
    target_id: str = ""


@dataclass(frozen=True)
class InsightsReport:
    report: str
    insights: str
    visualizations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"report": self.report, "visualizations": list(self.visualizations), "insights": self.insights}
