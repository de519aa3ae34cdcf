from __future__ import annotations

import pytest


def raw(class_id="C1", date="2024-05-01", status="Present", student_id="s1", **extra):
    """Attendance document as stored by the attendance-taking page."""

    doc = {"classId": class_id, "date": date, "status": status, "studentId": student_id}
    doc.update(extra)
    return doc


@pytest.fixture
def make_raw():
    return raw


class FakeAttendanceRepo:
    def __init__(self, rows, classes=None):
        self._rows = list(rows)
        self._classes = dict(classes or {})
        self.calls = []

    def _filter(self, key, value):
        return [r for r in self._rows if r.get(key) == value]

    def list_for_student(self, student_id):
        self.calls.append(("student", student_id))
        return self._filter("studentId", student_id)

    def list_for_class(self, class_id):
        self.calls.append(("class", class_id))
        return self._filter("classId", class_id)

    def list_for_faculty(self, faculty_id):
        self.calls.append(("faculty", faculty_id))
        return self._filter("facultyId", faculty_id)

    def list_all(self):
        self.calls.append(("all", None))
        return list(self._rows)

    def list_classes(self):
        return dict(self._classes)


class FakeInsightsClient:
    def __init__(self, answer=None):
        self.answer = answer if answer is not None else {
            "report": "Attendance is steady.",
            "visualizations": ["data:image/png;base64,AAAA"],
            "insights": "s2 is at risk.",
        }
        self.prompts = []

    def generate_json(self, system_prompt, user_prompt):
        self.prompts.append((system_prompt, user_prompt))
        return self.answer


@pytest.fixture
def fake_repo_cls():
    return FakeAttendanceRepo


@pytest.fixture
def fake_insights_client():
    return FakeInsightsClient()
