"""In-memory task store with per-task locking."""
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional
from contextlib import contextmanager
import logging
import threading
import uuid

from todo_mcp.models.task import Task

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Base exception for task store errors"""


class TaskNotFoundError(TaskStoreError):
    """Raised when no task has the requested ID"""
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Todo item {task_id} not found")


class TaskValidationError(TaskStoreError):
    """Raised when a task field fails validation"""
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clean_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise TaskValidationError("title", "Todo title cannot be empty")
    return title.strip()


class TaskStore:
    """
    Process-scoped owner of the todo collection.

    Locking:
    - an index lock guards the id -> record mapping and the entry-lock table;
      it is held only for dictionary reads and swaps
    - each task has its own entry lock, held for a whole read-modify-replace
      cycle so that mutations of one task are serialized
    - records are immutable, readers copy references and never see partial writes
    """

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}
        self._entry_locks: Dict[str, threading.Lock] = {}
        self._index_lock = threading.Lock()

    # ---- helpers ----

    def _new_id(self) -> str:
        # Random 122-bit ids; reuse of a deleted id is not a practical concern.
        while True:
            task_id = str(uuid.uuid4())
            if task_id not in self._tasks:
                return task_id

    @contextmanager
    def _locked_entry(self, task_id: str) -> Iterator[Task]:
        with self._index_lock:
            lock = self._entry_locks.get(task_id)
        if lock is None:
            raise TaskNotFoundError(task_id)

        with lock:
            with self._index_lock:
                task = self._tasks.get(task_id)
            # Deleted while we were waiting for the entry lock.
            if task is None:
                raise TaskNotFoundError(task_id)
            yield task

    def _replace(self, task_id: str, changes: Dict[str, Any]) -> Task:
        with self._locked_entry(task_id) as current:
            changes["updated_at"] = _utcnow()
            updated = current.model_copy(update=changes)
            with self._index_lock:
                self._tasks[task_id] = updated
            return updated

    # ---- public API ----

    def count(self) -> int:
        with self._index_lock:
            return len(self._tasks)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, task_id: object) -> bool:
        with self._index_lock:
            return task_id in self._tasks

    def list(self) -> List[Task]:
        """Return a snapshot of all tasks in insertion order."""
        with self._index_lock:
            return list(self._tasks.values())

    def get(self, task_id: str) -> Task:
        with self._index_lock:
            task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create(self, title: Optional[str], description: Optional[str] = None) -> Task:
        """Store a new, not yet completed task and return it."""
        clean_title = _clean_title(title)
        now = _utcnow()

        with self._index_lock:
            task = Task(
                id=self._new_id(),
                title=clean_title,
                description=description,
                completed=False,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task
            self._entry_locks[task.id] = threading.Lock()

        logger.debug(f"Todo created id={task.id}")
        return task

    def update(
        self,
        task_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Task:
        """
        Replace the supplied fields of a task

        Fields passed as None keep their stored value; updated_at is always
        refreshed.
        """
        changes: Dict[str, Any] = {}
        if title is not None:
            changes["title"] = _clean_title(title)
        if description is not None:
            changes["description"] = description
        if completed is not None:
            changes["completed"] = completed

        task = self._replace(task_id, changes)
        logger.debug(f"Todo updated id={task_id} fields={sorted(changes)}")
        return task

    def complete(self, task_id: str) -> Task:
        """Mark a task as completed (idempotent)."""
        task = self._replace(task_id, {"completed": True})
        logger.debug(f"Todo completed id={task_id}")
        return task

    def delete(self, task_id: str) -> None:
        with self._locked_entry(task_id):
            with self._index_lock:
                del self._tasks[task_id]
                # Callers still waiting on this lock find no task and raise NotFound.
                del self._entry_locks[task_id]
        logger.debug(f"Todo deleted id={task_id}")
