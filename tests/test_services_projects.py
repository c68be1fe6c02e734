import json

import pytest
import respx
from httpx import Response
from harvest_api import HarvestClient
from harvest_api.models import (
    ProjectCreateRequest,
    ProjectListOptions,
    ProjectTaskAssignmentCreateRequest,
    ProjectTaskAssignmentListOptions,
    ProjectTaskAssignmentUpdateRequest,
    ProjectUpdateRequest,
    ProjectUserAssignmentCreateRequest,
    ProjectUserAssignmentListOptions,
    ProjectUserAssignmentUpdateRequest,
)
from harvest_api.values import Date

BASE = "https://api.harvestapp.com/v2/"

PROJECT = {
    "id": 14308069,
    "name": "Online Store - Phase 1",
    "code": "OS1",
    "is_active": True,
    "is_billable": True,
    "bill_by": "Project",
    "budget": 200.0,
    "starts_on": "2017-06-01",
    "ends_on": None,
    "client": {"id": 5735776, "name": "123 Industries"},
}


@pytest.mark.asyncio
async def test_project_crud():
    async with respx.mock:
        listing = respx.get(BASE + "projects").mock(
            return_value=Response(200, json={"projects": [PROJECT], "page": 1})
        )
        create = respx.post(BASE + "projects").mock(
            return_value=Response(201, json=PROJECT)
        )
        respx.get(BASE + "projects/14308069").mock(
            return_value=Response(200, json=PROJECT)
        )
        update = respx.patch(BASE + "projects/14308069").mock(
            return_value=Response(200, json=dict(PROJECT, name="Phase 2"))
        )
        delete = respx.delete(BASE + "projects/14308069").mock(
            return_value=Response(200)
        )

        async with HarvestClient(account_id="1") as client:
            projects, _ = await client.projects.list(
                ProjectListOptions(client_id=5735776, is_active=True, page=2)
            )
            await client.projects.create(
                ProjectCreateRequest(
                    client_id=5735776,
                    name="Online Store - Phase 1",
                    is_billable=True,
                    bill_by="Project",
                    budget_by="project",
                    starts_on=Date(2017, 6, 1),
                )
            )
            fetched, _ = await client.projects.get(14308069)
            updated, _ = await client.projects.update(
                14308069, ProjectUpdateRequest(name="Phase 2")
            )
            await client.projects.delete(14308069)

        assert dict(listing.calls[0].request.url.params) == {
            "client_id": "5735776",
            "is_active": "true",
            "page": "2",
        }
        assert projects.projects[0].client.name == "123 Industries"
        assert json.loads(create.calls[0].request.content) == {
            "client_id": 5735776,
            "name": "Online Store - Phase 1",
            "is_billable": True,
            "bill_by": "Project",
            "budget_by": "project",
            "starts_on": "2017-06-01",
        }
        assert fetched.starts_on == Date(2017, 6, 1)
        assert fetched.ends_on is None
        assert json.loads(update.calls[0].request.content) == {"name": "Phase 2"}
        assert updated.name == "Phase 2"
        assert delete.called


@pytest.mark.asyncio
async def test_task_assignments():
    assignment = {
        "id": 155505014,
        "billable": True,
        "is_active": True,
        "hourly_rate": 100.0,
        "project": {"id": 14308069, "name": "Online Store - Phase 1"},
        "task": {"id": 8083365, "name": "Graphic Design"},
    }
    path = BASE + "projects/14308069/task_assignments"
    async with respx.mock:
        listing = respx.get(path).mock(
            return_value=Response(200, json={"task_assignments": [assignment]})
        )
        create = respx.post(path).mock(return_value=Response(201, json=assignment))
        respx.get(path + "/155505014").mock(
            return_value=Response(200, json=assignment)
        )
        update = respx.patch(path + "/155505014").mock(
            return_value=Response(200, json=dict(assignment, budget=120.0))
        )
        delete = respx.delete(path + "/155505014").mock(return_value=Response(200))

        async with HarvestClient(account_id="1") as client:
            listed, _ = await client.projects.list_task_assignments(
                14308069, ProjectTaskAssignmentListOptions(is_active=False)
            )
            await client.projects.create_task_assignment(
                14308069,
                ProjectTaskAssignmentCreateRequest(task_id=8083365, hourly_rate=100.0),
            )
            fetched, _ = await client.projects.get_task_assignment(14308069, 155505014)
            updated, _ = await client.projects.update_task_assignment(
                14308069, 155505014, ProjectTaskAssignmentUpdateRequest(budget=120.0)
            )
            await client.projects.delete_task_assignment(14308069, 155505014)

        assert listing.calls[0].request.url.params["is_active"] == "false"
        assert listed.task_assignments[0].task.name == "Graphic Design"
        assert json.loads(create.calls[0].request.content) == {
            "task_id": 8083365,
            "hourly_rate": 100.0,
        }
        assert fetched.hourly_rate == 100.0
        assert json.loads(update.calls[0].request.content) == {"budget": 120.0}
        assert updated.budget == 120.0
        assert delete.called


@pytest.mark.asyncio
async def test_user_assignments():
    assignment = {
        "id": 125068554,
        "is_project_manager": True,
        "is_active": True,
        "use_default_rates": True,
        "project": {"id": 14308069, "name": "Online Store - Phase 1"},
        "user": {"id": 1782959, "name": "Kim Allen"},
    }
    path = BASE + "projects/14308069/user_assignments"
    async with respx.mock:
        listing = respx.get(path).mock(
            return_value=Response(200, json={"user_assignments": [assignment]})
        )
        create = respx.post(path).mock(return_value=Response(201, json=assignment))
        respx.get(path + "/125068554").mock(
            return_value=Response(200, json=assignment)
        )
        update = respx.patch(path + "/125068554").mock(
            return_value=Response(200, json=dict(assignment, budget=120.0))
        )
        delete = respx.delete(path + "/125068554").mock(return_value=Response(200))

        async with HarvestClient(account_id="1") as client:
            listed, _ = await client.projects.list_user_assignments(
                14308069, ProjectUserAssignmentListOptions(user_id=1782959)
            )
            await client.projects.create_user_assignment(
                14308069,
                ProjectUserAssignmentCreateRequest(
                    user_id=1782959, is_project_manager=False
                ),
            )
            fetched, _ = await client.projects.get_user_assignment(14308069, 125068554)
            await client.projects.update_user_assignment(
                14308069, 125068554, ProjectUserAssignmentUpdateRequest(budget=120.0)
            )
            await client.projects.delete_user_assignment(14308069, 125068554)

        assert listing.calls[0].request.url.params["user_id"] == "1782959"
        assert listed.user_assignments[0].user.name == "Kim Allen"
        assert json.loads(create.calls[0].request.content) == {
            "user_id": 1782959,
            "is_project_manager": False,
        }
        assert fetched.is_project_manager is True
        assert json.loads(update.calls[0].request.content) == {"budget": 120.0}
        assert delete.called
