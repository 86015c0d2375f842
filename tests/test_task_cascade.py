"""Tests for turning task service outcomes into cascade errors."""

import pytest

from projectsvc.errors.exceptions import (
    ProjectDetailsNotRetrievedError,
    TasksCanNotBeCompletedError,
    TasksCanNotBeDeletedError,
)
from projectsvc.models.task import TaskResponse
from projectsvc.services.task_cascade import TaskCascade


async def test_fetch_counts_reads_both_counts(fake_tasks):
    fake_tasks.counts["ALPHA"] = {"completedTaskCount": 3, "nonCompletedTaskCount": 5}
    counts = await TaskCascade(fake_tasks).fetch_counts("ALPHA")
    assert counts.completed == 3
    assert counts.non_completed == 5


async def test_fetch_counts_failure_raises_details_not_retrieved(fake_tasks):
    fake_tasks.fail_counts_for.add("ALPHA")
    with pytest.raises(ProjectDetailsNotRetrievedError):
        await TaskCascade(fake_tasks).fetch_counts("ALPHA")


async def test_fetch_counts_with_malformed_data_raises(fake_tasks):
    fake_tasks.counts["ALPHA"] = {"completedTaskCount": 3}
    with pytest.raises(ProjectDetailsNotRetrievedError):
        await TaskCascade(fake_tasks).fetch_counts("ALPHA")


async def test_fetch_counts_without_data_raises():
    class NoData:
        async def get_counts_by_project(self, project_code):
            return TaskResponse(success=True, data=None)

    with pytest.raises(ProjectDetailsNotRetrievedError):
        await TaskCascade(NoData()).fetch_counts("ALPHA")


async def test_complete_all_calls_once(fake_tasks):
    await TaskCascade(fake_tasks).complete_all("ALPHA")
    assert fake_tasks.calls == [("complete", "ALPHA")]


async def test_complete_all_failure(fake_tasks):
    fake_tasks.complete_succeeds = False
    with pytest.raises(TasksCanNotBeCompletedError) as exc_info:
        await TaskCascade(fake_tasks).complete_all("ALPHA")
    assert exc_info.value.code == "TASKS_CANNOT_BE_COMPLETED"


async def test_delete_all_failure(fake_tasks):
    fake_tasks.delete_succeeds = False
    with pytest.raises(TasksCanNotBeDeletedError) as exc_info:
        await TaskCascade(fake_tasks).delete_all("ALPHA")
    assert exc_info.value.code == "TASKS_CANNOT_BE_DELETED"
    assert fake_tasks.calls_of("delete") == ["ALPHA"]
