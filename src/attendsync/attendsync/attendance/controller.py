from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import ValidationError
from .export import attendance_log_csv, subject_stats_csv

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.analytics_service

    def _bad_request(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    def _server_error(what: str):
        logger.exception("Failed to build %s", what)
        return jsonify({"success": False, "message": f"System error while building {what}"}), 500

    @app.route("/api/students/<student_id>/attendance", methods=["GET"], endpoint="student_attendance")
    def student_attendance(student_id: str):
        try:
            dashboard = service.student_dashboard(student_id)
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error("student dashboard")
        return jsonify({"success": True, "data": dashboard.to_dict()}), 200

    @app.route("/api/students/<student_id>/attendance.csv", methods=["GET"], endpoint="student_attendance_csv")
    def student_attendance_csv(student_id: str):
        try:
            dashboard = service.student_dashboard(student_id)
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error("attendance export")

        filename = f"attendance_{dashboard.student_id}.csv"
        return app.response_class(
            subject_stats_csv(dashboard.subjects),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/students/<student_id>/attendance-log.csv", methods=["GET"], endpoint="student_attendance_log_csv")
    def student_attendance_log_csv(student_id: str):
        try:
            dashboard = service.student_dashboard(student_id)
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error("attendance log export")

        return app.response_class(
            attendance_log_csv(dashboard.log),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=attendance_log_{dashboard.student_id}.csv"},
        )

    @app.route("/api/faculty/<faculty_id>/attendance", methods=["GET"], endpoint="faculty_attendance")
    def faculty_attendance(faculty_id: str):
        try:
            dashboard = service.faculty_dashboard(faculty_id)
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error("faculty dashboard")
        return jsonify({"success": True, "data": dashboard.to_dict()}), 200

    @app.route("/api/classes/<class_id>/attendance", methods=["GET"], endpoint="class_attendance")
    def class_attendance(class_id: str):
        try:
            report = service.class_report(class_id)
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error("class report")
        return jsonify({"success": True, "data": report.to_dict()}), 200

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    def admin_attendance():
        try:
            overview = service.admin_overview()
        except Exception:
            return _server_error("admin overview")
        return jsonify({"success": True, "data": overview.to_dict()}), 200
