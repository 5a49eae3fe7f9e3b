from fastapi import Depends
from fastapi.testclient import TestClient
from sqlmodel import Session

from school_api import models
from school_api.database import engine, get_session
from school_api.dependencies import get_course_repository
from school_api.main import app
from school_api.repositories import CourseRepository

client = TestClient(app)


def _create(name="Ada", department="Math", **extra):
    body = {"name": name, "department": department}
    body.update(extra)
    r = client.post("/teachers", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_returns_record_and_is_fetchable():
    created = _create("A", "Math")
    assert created["name"] == "A"
    assert created["department"] == "Math"
    assert isinstance(created["id"], int)
    assert "courses" not in created

    r = client.get(f"/teachers/{created['id']}")
    assert r.status_code == 200
    fetched = r.json()
    assert fetched["name"] == "A"
    assert fetched["department"] == "Math"
    assert fetched["courses"] == []


def test_create_links_only_existing_courses(course_ids):
    c1, c2, _ = course_ids
    created = _create("A", "Math", CourseIds=[c1, c2, 999])
    assert created["name"] == "A"
    assert created["department"] == "Math"

    r = client.get(f"/teachers/{created['id']}", params={"populate": "courses"})
    assert r.status_code == 200
    assert sorted(c["id"] for c in r.json()["courses"]) == [c1, c2]


def test_create_ignores_non_list_course_ids(course_ids):
    created = _create(CourseIds=str(course_ids[0]))
    r = client.get(f"/teachers/{created['id']}")
    assert r.json()["courses"] == []


def test_create_without_required_field_is_500():
    r = client.post("/teachers", json={"name": "No department"})
    assert r.status_code == 500
    assert "error" in r.json()
    assert client.get("/teachers").json()["meta"]["totalItems"] == 0


def test_create_rolls_back_when_linking_fails(course_ids):
    class DuplicateCourseRepository(CourseRepository):
        # transient copies of existing rows: inserting them violates the primary key
        def list_by_ids(self, ids):
            return [models.Course(id=i, title="duplicate") for i in ids]

    def failing_courses(db: Session = Depends(get_session)):
        return DuplicateCourseRepository(db)

    app.dependency_overrides[get_course_repository] = failing_courses
    r = client.post("/teachers", json={"name": "A", "department": "Math", "CourseIds": course_ids[:1]})
    assert r.status_code == 500
    assert r.json()["error"]

    app.dependency_overrides.clear()
    assert client.get("/teachers").json()["meta"]["totalItems"] == 0


def test_list_paginates_and_counts_teachers():
    for i in range(3):
        _create(f"T{i}")
    r = client.get("/teachers", params={"limit": "2"})
    assert r.status_code == 200
    body = r.json()
    assert len(body["data"]) == 2
    assert body["meta"] == {"totalItems": 3, "page": 1, "totalPages": 2}

    r2 = client.get("/teachers", params={"limit": "2", "page": "2"})
    body2 = r2.json()
    assert [t["name"] for t in body2["data"]] == ["T2"]
    assert body2["meta"]["page"] == 2


def test_list_falls_back_to_defaults_for_bad_numbers():
    for i in range(12):
        _create(f"T{i}")
    body = client.get("/teachers", params={"limit": "abc", "page": "x"}).json()
    assert len(body["data"]) == 10
    assert body["meta"] == {"totalItems": 12, "page": 1, "totalPages": 2}


def test_list_sorts_ascending_by_default_and_descending_on_request():
    ids = [_create(f"T{i}")["id"] for i in range(3)]
    asc = [t["id"] for t in client.get("/teachers").json()["data"]]
    assert asc == sorted(ids)
    desc = [t["id"] for t in client.get("/teachers", params={"sort": "desc"}).json()["data"]]
    assert desc == sorted(ids, reverse=True)
    other = [t["id"] for t in client.get("/teachers", params={"sort": "newest"}).json()["data"]]
    assert other == sorted(ids)


def test_list_populate_controls_course_loading(course_ids):
    _create("A", CourseIds=course_ids[:2])

    plain = client.get("/teachers").json()["data"][0]
    assert "courses" not in plain

    for populate in ("courses", "courseId", "name,courseId"):
        item = client.get("/teachers", params={"populate": populate}).json()["data"][0]
        assert sorted(c["id"] for c in item["courses"]) == sorted(course_ids[:2])

    unknown = client.get("/teachers", params={"populate": "students"}).json()["data"][0]
    assert "courses" not in unknown


def test_update_merges_allowed_fields_only(course_ids):
    created = _create("A", "Math", CourseIds=[course_ids[0]])
    r = client.put(
        f"/teachers/{created['id']}",
        json={"name": "B", "id": 999, "CourseIds": course_ids, "courseIds": course_ids},
    )
    assert r.status_code == 200
    updated = r.json()
    assert updated["id"] == created["id"]
    assert updated["name"] == "B"
    assert updated["department"] == "Math"

    fetched = client.get(f"/teachers/{created['id']}").json()
    assert [c["id"] for c in fetched["courses"]] == [course_ids[0]]


def test_update_store_failure_is_500_and_keeps_record():
    created = _create("A", "Math")
    r = client.put(f"/teachers/{created['id']}", json={"name": None})
    assert r.status_code == 500
    assert "error" in r.json()
    assert client.get(f"/teachers/{created['id']}").json()["name"] == "A"


def test_missing_ids_are_404_without_mutation():
    created = _create("A", "Math")
    missing = created["id"] + 100
    for r in (
        client.get(f"/teachers/{missing}"),
        client.put(f"/teachers/{missing}", json={"name": "B"}),
        client.delete(f"/teachers/{missing}"),
    ):
        assert r.status_code == 404
        assert r.json() == {"message": "Not found"}
    assert client.get("/teachers").json()["meta"]["totalItems"] == 1


def test_delete_then_get_is_404_and_courses_survive(course_ids):
    created = _create("A", CourseIds=course_ids)
    r = client.delete(f"/teachers/{created['id']}")
    assert r.status_code == 200
    assert r.json() == {"message": "Deleted"}
    assert client.get(f"/teachers/{created['id']}").status_code == 404

    with Session(engine) as s:
        assert CourseRepository(s).count() == len(course_ids)


def test_non_integer_id_is_500():
    r = client.get("/teachers/abc")
    assert r.status_code == 500
    assert "error" in r.json()


def test_request_id_is_echoed():
    r = client.get("/teachers", headers={"X-Request-ID": "req-123"})
    assert r.headers["X-Request-ID"] == "req-123"


def test_create_reads_only_the_course_ids_key(course_ids):
    created = _create(course_ids=[course_ids[0]])
    r = client.get(f"/teachers/{created['id']}")
    assert r.json()["courses"] == []
