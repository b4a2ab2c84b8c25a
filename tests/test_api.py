"""API endpoint tests."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def test_root(client):
    """Test the root banner."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Task Handler is running"


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_add_user(client):
    """Test a new email is inserted with its profile fields."""
    response = client.post(
        "/addUser", json={"email": "new@x.com", "name": "New User", "photoURL": "http://p/1.png"}
    )
    assert response.status_code == 200
    assert response.json()["acknowledged"] is True
    assert response.json()["insertedId"] is not None


def test_add_existing_user_is_noop(client):
    """Test registering the same email twice inserts nothing the second time."""
    client.post("/addUser", json={"email": "dup@x.com", "name": "First"})

    response = client.post("/addUser", json={"email": "dup@x.com", "name": "Second"})
    assert response.status_code == 200
    assert response.json()["insertedId"] is None


def test_add_user_requires_email(client):
    """Test registering without an email is rejected."""
    response = client.post("/addUser", json={"name": "Nobody"})
    assert response.status_code == 400


def test_add_task(client):
    """Test adding a task returns its id and it shows up in the list."""
    response = client.post(
        "/addTask",
        json={
            "title": "Buy milk",
            "description": "2 litres",
            "category": "todo",
            "email": "a@x.com",
            "deadline": "2026-11-01T09:00:00Z",
        },
    )
    assert response.status_code == 200
    task_id = response.json()["insertedId"]

    tasks = client.get("/getTasks", params={"email": "a@x.com"}).json()
    assert len(tasks) == 1
    task = tasks[0]
    assert task["_id"] == task_id
    assert task["position"] == 0
    assert task["category"] == "todo"
    assert task["addedTime"] is not None
    assert task["modifiedTime"] is None
    assert task["deadline"].startswith("2026-11-01T09:00:00")


def test_add_task_missing_title(client):
    """Test adding a task without a title is a 400 and logs nothing."""
    response = client.post(
        "/addTask", json={"description": "d", "category": "todo", "email": "a@x.com"}
    )
    assert response.status_code == 400
    assert client.get("/getHistory/a@x.com").json() == []


def test_get_tasks_only_returns_own_tasks(client, make_task):
    """Test tasks are filtered by owner email."""
    make_task(title="Mine", email="a@x.com")
    make_task(title="Theirs", email="b@x.com")

    tasks = client.get("/getTasks", params={"email": "a@x.com"}).json()
    assert [t["title"] for t in tasks] == ["Mine"]


def test_positions_per_category(client, make_task):
    """Test each category numbers its tasks from zero."""
    make_task(title="T1", category="todo")
    make_task(title="T2", category="todo")
    make_task(title="D1", category="done")

    tasks = client.get("/getTasks", params={"email": "a@x.com"}).json()
    by_title = {t["title"]: (t["category"], t["position"]) for t in tasks}
    assert by_title == {"T1": ("todo", 0), "T2": ("todo", 1), "D1": ("done", 0)}


def test_update_task(client, make_task):
    """Test moving a task to another column."""
    task_id = make_task()

    response = client.patch(
        f"/updateTask/{task_id}",
        json={"category": "in-progress", "position": 0, "email": "a@x.com"},
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Task updated successfully"

    task = client.get("/getTasks", params={"email": "a@x.com"}).json()[0]
    assert task["category"] == "in-progress"
    assert task["modifiedTime"] is not None


def test_update_task_missing_category(client, make_task):
    """Test moving a task without a category is a 400."""
    task_id = make_task()

    response = client.patch(f"/updateTask/{task_id}", json={"position": 1})
    assert response.status_code == 400
    assert response.json()["detail"] == "Category is required"


def test_update_task_not_found(client):
    """Test moving an unknown task is a 404."""
    response = client.patch("/updateTask/9999", json={"category": "done", "position": 0})
    assert response.status_code == 404


def test_update_task_info(client, make_task):
    """Test editing a task's title and description."""
    task_id = make_task(title="Old")

    response = client.patch(
        f"/updateTaskInfo/{task_id}",
        json={"title": "New", "description": "Changed", "category": "todo", "email": "a@x.com"},
    )
    assert response.status_code == 200
    assert response.json()["success"] is True

    task = client.get("/getTasks", params={"email": "a@x.com"}).json()[0]
    assert task["title"] == "New"
    assert task["description"] == "Changed"


def test_update_task_info_missing_fields(client, make_task):
    """Test editing without a title is a 400."""
    task_id = make_task()

    response = client.patch(f"/updateTaskInfo/{task_id}", json={"description": "x"})
    assert response.status_code == 400


def test_update_task_info_not_found(client):
    """Test editing an unknown task is a 404."""
    response = client.patch("/updateTaskInfo/9999", json={"title": "t", "description": "d"})
    assert response.status_code == 404


def test_reorder_tasks(client, make_task):
    """Test reorder assigns positions from the submitted order."""
    t1 = make_task(title="t1")
    t2 = make_task(title="t2")

    response = client.patch(
        "/reorderTasks",
        json={
            "email": "a@x.com",
            "category": "todo",
            "tasks": [{"_id": t2, "title": "t2"}, {"_id": t1, "title": "t1"}],
        },
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Tasks reordered successfully"

    tasks = client.get("/getTasks", params={"email": "a@x.com"}).json()
    assert {t["title"]: t["position"] for t in tasks} == {"t2": 0, "t1": 1}

    latest = client.get("/getHistory/a@x.com").json()[0]
    assert latest["action"] == "reorder"
    assert latest["details"]["category"] == "todo"
    assert latest["taskId"] is None


def test_reorder_tasks_missing_tasks(client):
    """Test reorder without a task list is a 400."""
    response = client.patch("/reorderTasks", json={"email": "a@x.com", "category": "todo"})
    assert response.status_code == 400


def test_reorder_tasks_empty_list(client, make_task):
    """Test an empty task list is accepted and still logs one reorder entry."""
    make_task()

    response = client.patch(
        "/reorderTasks", json={"email": "a@x.com", "category": "todo", "tasks": []}
    )
    assert response.status_code == 200

    actions = [e["action"] for e in client.get("/getHistory/a@x.com").json()]
    assert actions == ["reorder", "add"]


def test_delete_task(client, make_task):
    """Test deleting a task reports one deleted record."""
    task_id = make_task(title="Gone", category="done")

    response = client.delete(f"/deleteTask/{task_id}")
    assert response.status_code == 200
    assert response.json() == {"acknowledged": True, "deletedCount": 1}
    assert client.get("/getTasks", params={"email": "a@x.com"}).json() == []

    latest = client.get("/getHistory/a@x.com").json()[0]
    assert latest["action"] == "delete"
    assert latest["taskId"] == task_id
    assert latest["details"] == {"title": "Gone", "category": "done"}


def test_delete_missing_task(client):
    """Test deleting an unknown id reports zero deleted, not an error."""
    response = client.delete("/deleteTask/424242")
    assert response.status_code == 200
    assert response.json()["deletedCount"] == 0


def test_get_tasks_store_error(client):
    """Test a database failure is a 500 without internal detail."""
    error = OperationalError("SELECT", {}, Exception("connection refused"))
    with patch("sqlalchemy.orm.Query.all", side_effect=error):
        response = client.get("/getTasks", params={"email": "a@x.com"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal Server Error"
