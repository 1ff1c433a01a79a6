import psycopg2
from fastapi.testclient import TestClient

from handlers.context import ServerContext, parse_record_id
from main import create_app
from tests.conftest import FakePool


def test_health_is_always_ok():
    # No context attached: the pool does not exist yet.
    client = TestClient(create_app())
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "backend"
    assert body["uptime"] >= 0


def test_db_routes_unavailable_without_pool():
    client = TestClient(create_app())
    assert client.get("/student").status_code == 503
    assert client.get("/health/db").status_code == 503


def test_health_db_connected(client):
    r = client.get("/health/db")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["result"] == {"db_up": 1}


def test_health_db_down(context):
    context = ServerContext(
        pool=FakePool(ping_error=psycopg2.OperationalError("server closed the connection")),
        students=context.students,
        teachers=context.teachers,
    )
    client = TestClient(create_app(context))
    r = client.get("/health/db")
    assert r.status_code == 500
    assert r.json() == {
        "status": "error",
        "database": "down",
        "error": "server closed the connection",
    }


def test_add_student_then_list(client):
    r = client.post("/addstudent", json={"name": "Alice", "rollNo": "A1", "class": "5A"})
    assert r.status_code == 200
    assert r.json() == {"message": "Student added"}

    rows = client.get("/student").json()
    assert len(rows) == 1
    assert rows[0]["name"] == "Alice"
    assert rows[0]["roll_number"] == "A1"
    assert rows[0]["class"] == "5A"
    assert isinstance(rows[0]["id"], int)


def test_add_student_without_fields_still_succeeds(client, context):
    r = client.post("/addstudent", json={})
    assert r.status_code == 200
    assert context.students.rows[1].name is None


def test_root_lists_students(client):
    client.post("/addstudent", json={"name": "Bob", "rollNo": "B2", "class": "6B"})
    body = client.get("/").json()
    assert body["message"].startswith("Backend running")
    assert [s["name"] for s in body["data"]] == ["Bob"]


def test_delete_missing_student_returns_404(client):
    r = client.delete("/student/999")
    assert r.status_code == 404
    assert r.json() == {"message": "Student not found"}


def test_delete_student(client):
    client.post("/addstudent", json={"name": "Alice", "rollNo": "A1", "class": "5A"})
    r = client.delete("/student/1")
    assert r.status_code == 200
    assert r.json() == {"message": "Student deleted successfully"}
    assert client.get("/student").json() == []


def test_delete_student_query_error(client, context):
    context.students.error = psycopg2.OperationalError("boom")
    r = client.delete("/student/1")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to delete student"}


def test_list_students_query_error_reports_message(client, context):
    context.students.error = psycopg2.ProgrammingError('relation "student" does not exist')
    r = client.get("/student")
    assert r.status_code == 500
    assert r.json() == {"error": 'relation "student" does not exist'}


def test_teacher_crud(client):
    r = client.post("/addteacher", json={"name": "Ms. Rao", "subject": "Maths", "class": "5A"})
    assert r.status_code == 200
    assert r.json() == {"message": "Teacher added"}

    rows = client.get("/teacher").json()
    assert rows[0]["subject"] == "Maths"
    assert rows[0]["class"] == "5A"

    assert client.delete(f"/teacher/{rows[0]['id']}").status_code == 200
    r = client.delete(f"/teacher/{rows[0]['id']}")
    assert r.status_code == 404
    assert r.json() == {"message": "Teacher not found"}


def test_delete_teacher_query_error(client, context):
    context.teachers.error = psycopg2.OperationalError("boom")
    r = client.delete("/teacher/3")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to delete teacher"}


def test_add_student_accepts_numeric_fields(client, context):
    r = client.post("/addstudent", json={"name": "Alice", "rollNo": 12, "class": 5})
    assert r.status_code == 200
    assert r.json() == {"message": "Student added"}

    stored = context.students.rows[1]
    assert (stored.name, stored.roll_number, stored.class_name) == ("Alice", "12", "5")


def test_add_student_without_body(client, context):
    r = client.post("/addstudent")
    assert r.status_code == 200
    assert r.json() == {"message": "Student added"}
    assert context.students.rows[1].roll_number is None


def test_add_teacher_accepts_numeric_fields_and_no_body(client, context):
    r = client.post("/addteacher", json={"name": "Mr. Lee", "subject": 101, "class": 6})
    assert r.status_code == 200
    assert context.teachers.rows[1].subject == "101"

    r = client.post("/addteacher")
    assert r.status_code == 200
    assert r.json() == {"message": "Teacher added"}


def test_delete_student_with_non_numeric_id_returns_404(client):
    r = client.delete("/student/abc")
    assert r.status_code == 404
    assert r.json() == {"message": "Student not found"}


def test_delete_teacher_with_out_of_range_id_returns_404(client, context):
    context.teachers.error = psycopg2.DataError("integer out of range")
    for raw_id in ("abc", "0", "-3", "99999999999"):
        r = client.delete(f"/teacher/{raw_id}")
        assert r.status_code == 404
        assert r.json() == {"message": "Teacher not found"}


def test_parse_record_id():
    assert parse_record_id("42") == 42
    assert parse_record_id("2147483647") == 2147483647
    assert parse_record_id("2147483648") is None
    assert parse_record_id("1.5") is None
    assert parse_record_id("") is None
