"""Integration tests for Task Views API endpoints."""

from uuid import uuid4

import pytest


@pytest.fixture
def kanban(make_status, make_view, make_task, place):
    """A kanban view with Todo=[t1, t2] and an empty Doing column."""
    todo = make_status("Todo")
    doing = make_status("Doing")
    view = make_view(["Todo", "Doing"], name="Sprint Board")
    t1 = make_task(todo, "T1")
    t2 = make_task(todo, "T2")
    place(view, todo, [t1, t2])
    return {
        "view_id": str(view.id),
        "todo_id": str(todo.id),
        "doing_id": str(doing.id),
        "t1_id": str(t1.id),
        "t2_id": str(t2.id),
    }


def test_create_task_view(client, owner):
    """Test creating a view with statuses by name."""
    response = client.post(
        "/api/v1/task-views",
        json={
            "taskable_type": owner.type.value,
            "taskable_id": str(owner.id),
            "name": "Sprint Board",
            "type": "kanban",
            "statuses": [{"name": "Todo"}, {"name": "Doing", "color": "#f1c40f"}],
            "metadata": {"wip_limit": 3},
            "is_default": True,
        },
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["slug"] == f"sprint-board-kanban-{owner.id}"
    assert data["type"] == "kanban"
    assert data["is_default"] is True
    assert data["metadata"] == {"wip_limit": 3}
    assert [s["name"] for s in data["statuses"]] == ["Todo", "Doing"]


def test_create_task_view_invalid_type(client, owner):
    response = client.post(
        "/api/v1/task-views",
        json={
            "taskable_type": owner.type.value,
            "taskable_id": str(owner.id),
            "name": "Board",
            "type": "timeline",
        },
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert "type" in response.json()["error"]["details"]


def test_create_task_view_slug_conflict(client, owner, make_view):
    make_view(["Todo"], name="Board")

    response = client.post(
        "/api/v1/task-views",
        json={
            "taskable_type": owner.type.value,
            "taskable_id": str(owner.id),
            "name": "Board",
            "type": "kanban",
        },
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "TASK_VIEW_SLUG_CONFLICT"


def test_list_task_views(client, owner, make_view):
    make_view(["Todo"], name="Beta")
    make_view(["Todo"], name="Alpha", is_default=True)

    response = client.get(
        "/api/v1/task-views",
        params={"taskable_type": owner.type.value, "taskable_id": str(owner.id)},
    )

    assert response.status_code == 200
    body = response.json()
    assert [v["name"] for v in body["data"]] == ["Alpha", "Beta"]
    assert body["meta"]["total"] == 2


def test_get_task_view_not_found(client):
    response = client.get(f"/api/v1/task-views/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TASK_VIEW_NOT_FOUND"


def test_rename_task_view(client, owner, kanban):
    response = client.patch(f"/api/v1/task-views/{kanban['view_id']}", json={"name": "Team Board"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Team Board"
    assert data["slug"] == f"team-board-kanban-{owner.id}"


def test_set_default_task_view(client, make_view):
    first = make_view(["Todo"], is_default=True)
    second = make_view(["Todo"])
    first_id = str(first.id)

    response = client.patch(f"/api/v1/task-views/{second.id}/default")

    assert response.status_code == 200
    assert response.json()["data"]["is_default"] is True
    assert client.get(f"/api/v1/task-views/{first_id}").json()["data"]["is_default"] is False


def test_delete_task_view(client, kanban):
    response = client.delete(f"/api/v1/task-views/{kanban['view_id']}")

    assert response.status_code == 204
    assert client.get(f"/api/v1/task-views/{kanban['view_id']}").status_code == 404
    assert client.get(f"/api/v1/task-statuses/{kanban['todo_id']}").status_code == 200


def test_delete_default_task_view_is_rejected(client, make_view):
    view = make_view(["Todo"], is_default=True)
    view_id = str(view.id)

    response = client.delete(f"/api/v1/task-views/{view_id}")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "TASK_VIEW_DEFAULT_NOT_DELETABLE"
    assert client.get(f"/api/v1/task-views/{view_id}").json()["data"]["is_default"] is True


def test_sync_statuses_by_name(client, kanban):
    response = client.put(
        f"/api/v1/task-views/{kanban['view_id']}/statuses",
        json={"statuses": [{"name": "todo"}, {"name": "Backlog", "color": "#111111"}]},
    )

    assert response.status_code == 200
    statuses = response.json()["data"]["statuses"]
    assert [s["name"] for s in statuses] == ["Todo", "Backlog"]
    assert statuses[0]["id"] == kanban["todo_id"]
    assert statuses[1]["color"] == "#111111"


def test_sync_statuses_by_ids(client, kanban):
    response = client.put(
        f"/api/v1/task-views/{kanban['view_id']}/status-ids",
        json={"status_ids": [kanban["doing_id"]]},
    )

    assert response.status_code == 200
    assert [s["id"] for s in response.json()["data"]["statuses"]] == [kanban["doing_id"]]
    assert client.get(f"/api/v1/task-views/{kanban['view_id']}/tasks").json()["data"] == []


@pytest.mark.parametrize(
    ("path", "payload", "field"),
    [
        ("statuses", {"statuses": []}, "statuses"),
        ("status-ids", {"status_ids": []}, "status_ids"),
    ],
)
def test_sync_statuses_requires_at_least_one(client, kanban, path, payload, field):
    response = client.put(f"/api/v1/task-views/{kanban['view_id']}/{path}", json=payload)

    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert field in body["error"]["details"]
    statuses = client.get(f"/api/v1/task-views/{kanban['view_id']}").json()["data"]["statuses"]
    assert [s["id"] for s in statuses] == [kanban["todo_id"], kanban["doing_id"]]


def test_list_visible_tasks(client, kanban):
    response = client.get(f"/api/v1/task-views/{kanban['view_id']}/tasks")

    assert response.status_code == 200
    assert [t["id"] for t in response.json()["data"]] == [kanban["t1_id"], kanban["t2_id"]]


def test_get_board(client, kanban):
    response = client.get(f"/api/v1/task-views/{kanban['view_id']}/board")

    assert response.status_code == 200
    board = response.json()["data"]
    assert [column["status"]["id"] for column in board] == [kanban["todo_id"], kanban["doing_id"]]
    assert [t["title"] for t in board[0]["tasks"]] == ["T1", "T2"]
    assert board[1]["tasks"] == []


def test_move_task(client, kanban):
    response = client.post(
        f"/api/v1/task-views/{kanban['view_id']}/moves",
        json={"task_id": kanban["t1_id"], "status_id": kanban["doing_id"], "position": 0},
    )

    assert response.status_code == 200
    board = response.json()["data"]
    assert [t["id"] for t in board[0]["tasks"]] == [kanban["t2_id"]]
    assert [t["id"] for t in board[1]["tasks"]] == [kanban["t1_id"]]
    assert board[1]["tasks"][0]["status_id"] == kanban["doing_id"]


def test_move_task_to_disabled_status(client, kanban, make_status):
    archived_id = str(make_status("Archived").id)

    response = client.post(
        f"/api/v1/task-views/{kanban['view_id']}/moves",
        json={"task_id": kanban["t1_id"], "status_id": archived_id, "position": 0},
    )

    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "TASK_STATUS_NOT_ENABLED_ON_VIEW"
    assert body["error"]["details"]["status_id"] == archived_id
    assert body["data"] is None


def test_move_task_of_other_owner(client, kanban, make_task, make_status, other_owner):
    foreign_id = str(make_task(make_status("Todo"), "Foreign", task_owner=other_owner).id)

    response = client.post(
        f"/api/v1/task-views/{kanban['view_id']}/moves",
        json={"task_id": foreign_id, "status_id": kanban["todo_id"], "position": 0},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "TASK_NOT_IN_VIEW_OWNER"


def test_move_unknown_task(client, kanban):
    response = client.post(
        f"/api/v1/task-views/{kanban['view_id']}/moves",
        json={"task_id": str(uuid4()), "status_id": kanban["todo_id"], "position": 0},
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TASK_NOT_FOUND"


def test_move_requires_integer_position(client, kanban):
    response = client.post(
        f"/api/v1/task-views/{kanban['view_id']}/moves",
        json={"task_id": kanban["t1_id"], "status_id": kanban["todo_id"], "position": "top"},
    )

    assert response.status_code == 422
    assert "position" in response.json()["error"]["details"]
