from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import InsightsError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/insights", methods=["POST"], endpoint="generate_insights")
    def generate_insights():
        """Run the AI report for a class, student or faculty member."""

        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Request body must be a JSON object"}), 400
        try:
            report = container.insights_service.generate_for(
                analysis_type=data.get("analysisType", ""),
                target_id=data.get("targetId", ""),
                report_format=data.get("reportFormat", ""),
                visualization_types=data.get("visualizationTypes") or [],
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except InsightsError as e:
            logger.warning("Insights generation failed: %s", e)
            return jsonify({"success": False, "message": str(e)}), 502
        return jsonify({"success": True, "data": report.to_dict()}), 200
