# tests/test_concurrency.py

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from todo_mcp.mcp.server import MCPServer
from todo_mcp.services.task_store import TaskStore


def test_concurrent_creates_yield_distinct_ids(mcp_server: MCPServer, store: TaskStore) -> None:
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(
            lambda i: mcp_server.dispatch("create_todo", {"title": f"task {i}"}),
            range(400),
        ))

    ids = [r["data"]["id"] for r in results]
    assert len(set(ids)) == 400
    assert store.count() == 400


def test_concurrent_updates_never_interleave(mcp_server: MCPServer, store: TaskStore) -> None:
    todo_id = store.create("start", "start").id
    payloads = [
        {"id": todo_id, "title": f"title-{i}", "description": f"description-{i}", "completed": i % 2 == 0}
        for i in range(300)
    ]

    seen = []
    stop = threading.Event()

    def reader() -> None:
        while not stop.is_set():
            seen.append(store.get(todo_id))

    watcher = threading.Thread(target=reader)
    watcher.start()
    try:
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda p: mcp_server.dispatch("update_todo", p), payloads))
    finally:
        stop.set()
        watcher.join()

    def consistent(title: str, description: str, completed: bool) -> bool:
        if title == "start":
            return description == "start"
        n = int(title.split("-")[1])
        return description == f"description-{n}" and completed == (n % 2 == 0)

    for result in results:
        todo = result["data"]
        assert consistent(todo["title"], todo["description"], todo["completed"])
    for task in seen:
        assert consistent(task.title, task.description, task.completed)

    final = store.get(todo_id)
    assert consistent(final.title, final.description, final.completed)


def test_update_racing_delete_is_all_or_nothing(store: TaskStore) -> None:
    ids = [store.create(f"task {i}").id for i in range(100)]

    def update(todo_id: str):
        try:
            return store.update(todo_id, title="updated")
        except Exception as e:
            return e

    with ThreadPoolExecutor(max_workers=8) as pool:
        updates = pool.map(update, ids)
        list(pool.map(store.delete, ids))
        list(updates)

    assert store.count() == 0
    assert store.list() == []


def test_reader_not_blocked_by_held_entry_lock(store: TaskStore) -> None:
    busy = store.create("busy")
    other = store.create("other")

    # Hold the entry lock of one task as a long-running mutation would.
    with store._locked_entry(busy.id):
        done = threading.Event()

        def work() -> None:
            store.get(busy.id)
            store.list()
            store.update(other.id, title="other (edited)")
            done.set()

        thread = threading.Thread(target=work)
        thread.start()
        assert done.wait(timeout=5)
        thread.join()

    assert store.get(other.id).title == "other (edited)"
