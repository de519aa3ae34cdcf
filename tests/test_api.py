from __future__ import annotations

import pytest

from attendsync.container import wire
from attendsync.main import create_app


@pytest.fixture
def client(monkeypatch, fake_repo_cls, fake_insights_client, make_raw):
    monkeypatch.setenv("APP_ENV", "testing")
    rows = [
        make_raw(class_id="C1", className="Physics", date="2024-05-01", facultyId="f1"),
        make_raw(class_id="C1", className="Physics", date="2024-05-02", facultyId="f1"),
        make_raw(class_id="C2", className="History", date="2024-05-01", status="Absent", facultyId="f1"),
    ]
    container = wire(attendance_repo=fake_repo_cls(rows, {"C1": "Physics"}), insights_client=fake_insights_client)
    app = create_app(container)
    return app.test_client()


def test_student_attendance_json(client):
    resp = client.get("/api/students/s1/attendance")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["summary"]["overall_percentage"] == 66.7
    assert data["summary"]["lowest_attendance_subject"] == {"subject": "History", "percentage": 0.0}


def test_student_attendance_csv(client):
    resp = client.get("/api/students/s1/attendance.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment; filename=attendance_s1.csv" == resp.headers["Content-Disposition"]


def test_blank_id_is_a_bad_request(client):
    resp = client.get("/api/classes/%20/attendance")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_faculty_and_admin_views(client):
    assert client.get("/api/faculty/f1/attendance").get_json()["data"]["class_count"] == 2
    assert client.get("/api/admin/attendance").get_json()["data"]["total_classes"] == 2


def test_insights_endpoint(client):
    resp = client.post(
        "/api/insights",
        json={"analysisType": "class", "targetId": "C1", "reportFormat": "PDF", "visualizationTypes": ["bar"]},
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"]["insights"] == "s2 is at risk."


def test_insights_endpoint_validation(client):
    resp = client.post("/api/insights", json={"analysisType": "class", "targetId": "C1", "reportFormat": "PDF"})

    assert resp.status_code == 400


def test_student_attendance_log_csv(client):
    resp = client.get("/api/students/s1/attendance-log.csv")

    lines = resp.get_data().decode("utf-8-sig").splitlines()
    assert lines[0] == "date,class_id,class_name,student_id,status"
    assert len(lines) == 4


def test_insights_model_failure_is_bad_gateway(client, fake_insights_client):
    fake_insights_client.answer = {"report": "x"}

    resp = client.post(
        "/api/insights",
        json={"analysisType": "class", "targetId": "C1", "reportFormat": "PDF", "visualizationTypes": ["bar"]},
    )

    assert resp.status_code == 502
    assert resp.get_json()["success"] is False


def test_insights_endpoint_rejects_non_object_body(client):
    resp = client.post("/api/insights", json=[{"analysisType": "class"}])

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


class BrokenAttendanceRepo:
    def list_for_student(self, student_id):
        raise RuntimeError("database unavailable")


@pytest.mark.parametrize("path", ["/api/students/s1/attendance.csv", "/api/students/s1/attendance-log.csv"])
def test_csv_export_failure_returns_json_error(monkeypatch, fake_insights_client, path):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(wire(attendance_repo=BrokenAttendanceRepo(), insights_client=fake_insights_client))

    resp = app.test_client().get(path)

    assert resp.status_code == 500
    assert resp.get_json()["success"] is False
