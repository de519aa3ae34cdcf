from __future__ import annotations

from .model import InsightsRequest

SYSTEM_PROMPT = (
    "You are an assistant specialized in analyzing school attendance data and giving actionable insights "
    "to admins and faculty. Return ONLY a JSON object with the keys "
    '"report" (string), "visualizations" (array of data URI strings) and "insights" (string).'
)

_USER_TEMPLATE = """Using the attendance data and preferences below:

1. Write a comprehensive attendance report suitable for the {report_format} format.
2. Describe visualizations ({visualizations}) of attendance trends and statistics, returned as data URIs.
3. Identify students at risk of failing due to poor attendance.
4. Highlight significant trends such as patterns of absenteeism or consistently low attendance.

Attendance data:
{attendance_data}

Analysis preferences:
{analysis_preferences}
"""


def render_user_prompt(request: InsightsRequest) -> str:
    return _USER_TEMPLATE.format(
        report_format=request.report_format.value,
        visualizations=", ".join(v.value for v in request.visualization_types),
        attendance_data=request.attendance_data,
        analysis_preferences=request.analysis_preferences,
    )
