"""API tests for offboarding processes."""

from datetime import date, datetime, timezone

import pytest

from offboarding.interfaces.api.dependencies import get_now, get_today

TODAY = date(2024, 3, 1)
NOW = datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc)


@pytest.fixture()
def api(client):
    client.app.dependency_overrides[get_today] = lambda: TODAY
    client.app.dependency_overrides[get_now] = lambda: NOW
    yield client
    client.app.dependency_overrides.clear()


@pytest.fixture()
def created(api, make_person, standard_template):
    person = make_person(first_name="Anna", last_name="Hansen")
    response = api.post(
        "/processes/",
        json={
            "template_id": standard_template.id,
            "person_id": person.id,
            "priority": "high",
            "created_by": "hr",
        },
    )
    assert response.status_code == 201
    return response.json()


def _activate(api, process_id):
    api.patch(f"/processes/{process_id}/status", json={"status": "pending_approval"})
    api.post(
        f"/processes/{process_id}/approvals",
        json={"approval": "manager", "approved_by": "boss"},
    )
    return api.post(
        f"/processes/{process_id}/approvals",
        json={"approval": "hr", "approved_by": "hr-team"},
    )


def test_create_process_returns_detail(created):
    assert created["status"] == "draft"
    assert created["process_name"] == "Anna Hansen Offboarding"
    assert created["target_completion_date"] == "2024-03-11"
    assert len(created["tasks"]) == 5
    assert len(created["documents"]) == 4
    assert created["progress"] == {
        "percentage": 0,
        "total_tasks": 5,
        "completed_tasks": 0,
        "in_progress_tasks": 0,
        "overdue_tasks": 0,
        "source": "tasks",
    }


def test_second_open_process_conflicts(api, created):
    response = api.post(
        "/processes/",
        json={"template_id": created["template_id"], "person_id": created["person_id"]},
    )

    assert response.status_code == 409


def test_create_process_for_unknown_person(api, standard_template):
    response = api.post(
        "/processes/", json={"template_id": standard_template.id, "person_id": 404}
    )

    assert response.status_code == 404


def test_create_process_with_unknown_priority(api, make_person, standard_template):
    person = make_person()

    response = api.post(
        "/processes/",
        json={
            "template_id": standard_template.id,
            "person_id": person.id,
            "priority": "whenever",
        },
    )

    assert response.status_code == 400


def test_list_processes_with_filters(api, created, make_person, standard_template):
    other = make_person(first_name="Lars", last_name="Berg", department="Sales")
    api.post(
        "/processes/",
        json={"template_id": standard_template.id, "person_id": other.id},
    )

    everything = api.get("/processes/", params={"status": "all"})
    sales = api.get("/processes/", params={"department": "sales"})
    by_name = api.get("/processes/", params={"sort_by": "name", "direction": "asc"})

    assert len(everything.json()) == 2
    assert [process["process_name"] for process in sales.json()] == ["Lars Berg Offboarding"]
    assert [process["process_name"] for process in by_name.json()] == [
        "Anna Hansen Offboarding",
        "Lars Berg Offboarding",
    ]
    assert everything.json()[0]["progress"]["total_tasks"] == 5


def test_list_processes_rejects_unknown_timeframe(api):
    response = api.get("/processes/", params={"timeframe": "someday"})

    assert response.status_code == 400


def test_approvals_activate_process(api, created):
    response = _activate(api, created["id"])

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "active"
    assert body["actual_start_date"] == "2024-03-02"
    assert body["hr_approved_by"] == "hr-team"


def test_invalid_transition_returns_400(api, created):
    response = api.patch(
        f"/processes/{created['id']}/status", json={"status": "completed"}
    )

    assert response.status_code == 400


def test_task_update_flow(api, created):
    _activate(api, created["id"])
    task = next(
        task for task in created["tasks"] if task["name"] == "Complete Equipment Return"
    )
    url = f"/processes/{created['id']}/tasks/{task['id']}"

    missing_evidence = api.patch(url, json={"status": "completed"})
    completed = api.patch(
        url, json={"status": "completed", "evidence_files": ["receipt.pdf"]}
    )

    assert missing_evidence.status_code == 400
    assert completed.status_code == 200
    assert completed.json()["evidence_files"] == ["receipt.pdf"]
    detail = api.get(f"/processes/{created['id']}").json()
    assert detail["progress"]["completed_tasks"] == 1
    assert detail["custom_fields"]["completion_percentage"] == 20


def test_document_submission(api, created):
    document = created["documents"][0]
    url = f"/processes/{created['id']}/documents/{document['id']}"

    response = api.patch(
        url, json={"status": "submitted", "file_reference": "files/form.pdf"}
    )

    assert response.status_code == 200
    assert response.json()["status"] == "submitted"


def test_overdue_check(api, created):
    _activate(api, created["id"])
    api.app.dependency_overrides[get_today] = lambda: date(2024, 3, 20)

    response = api.post("/processes/overdue-check")

    assert response.status_code == 200
    assert response.json() == {"processes_marked": 1, "tasks_marked": 5}
    assert api.get(f"/processes/{created['id']}").json()["status"] == "overdue"


def test_delete_process(api, created):
    response = api.delete(f"/processes/{created['id']}", params={"actor": "admin"})

    assert response.status_code == 204
    assert api.get(f"/processes/{created['id']}").status_code == 404
    audit = api.get(
        "/audit-logs/", params={"entity_type": "process", "entity_id": created["id"]}
    )
    assert [entry["action"] for entry in audit.json()] == ["created", "deleted"]
