"""
Directory sync controller tests
Every mutation is checked against a healthy directory, an HTTP error status
and an unreachable directory.
"""

import pytest

from models.enums import SyncOperation, SyncOutcome
from services.directory_sync import DirectorySyncController
from services.user_store import UserStore

FAILURES = [500, 404, "network"]


class TestLoad:

    @pytest.mark.asyncio
    async def test_load_populates_list_in_fetch_order(self, controller, fake_directory, renderer):
        result = await controller.load()

        assert result.operation == SyncOperation.LOAD
        assert result.outcome == SyncOutcome.SYNCED
        assert result.message == "Users loaded"
        assert [user.id for user in controller.users] == [1, 2, 3]
        assert renderer.renders[-1] == controller.users

    @pytest.mark.asyncio
    async def test_extra_directory_attributes_are_ignored(self, loaded_controller):
        user = loaded_controller.users[0]
        assert set(user.model_dump()) == {"id", "name", "username", "email", "phone", "website"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failure", FAILURES)
    async def test_failed_load_leaves_list_empty(self, loaded_controller, fake_directory, renderer, failure):
        fake_directory.fail_with = failure

        result = await loaded_controller.load()

        assert result.outcome == SyncOutcome.FAILED
        assert result.message == "Failed to load users"
        assert result.error
        assert loaded_controller.users == []
        assert renderer.renders[-1] == []

    @pytest.mark.asyncio
    async def test_record_without_id_fails_load(self, controller, fake_directory):
        fake_directory.users = [{"name": "No Id", "username": "noid", "email": "no@id.com"}]

        result = await controller.load()

        assert result.outcome == SyncOutcome.FAILED
        assert controller.users == []

    @pytest.mark.asyncio
    async def test_reload_resets_local_changes(self, loaded_controller, fake_directory, factory):
        fake_directory.fail_with = "network"
        await loaded_controller.create(factory.user_data())
        assert len(loaded_controller.users) == 4

        fake_directory.fail_with = None
        await loaded_controller.load()

        assert [user.id for user in loaded_controller.users] == [1, 2, 3]


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_appends_server_record(self, loaded_controller, fake_directory, factory):
        data = factory.user_data()

        result = await loaded_controller.create(data)

        assert result.outcome == SyncOutcome.SYNCED
        assert result.message == "User added successfully"
        assert result.user.id == 11
        assert loaded_controller.users[-1] == result.user
        assert loaded_controller.users[-1].email == data.email
        assert fake_directory.methods[-1] == "POST"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failure", FAILURES)
    async def test_failed_create_assigns_max_plus_one(self, directory_client, fake_directory, renderer, factory, failure):
        store = UserStore([factory.user(1), factory.user(3)])
        controller = DirectorySyncController(directory_client, store, renderer)
        fake_directory.fail_with = failure
        data = factory.user_data()

        result = await controller.create(data)

        assert result.outcome == SyncOutcome.LOCAL_ONLY
        assert result.message == "User added locally (API failed)"
        assert result.user.id == 4
        assert [user.id for user in controller.users] == [1, 3, 4]
        assert controller.users[-1].username == data.username
        assert renderer.notifications[-1] == result

    @pytest.mark.asyncio
    async def test_failed_create_on_empty_list(self, controller, fake_directory, factory):
        fake_directory.fail_with = "network"

        result = await controller.create(factory.user_data())

        assert result.user.id == 1

    @pytest.mark.asyncio
    async def test_server_id_collision_keeps_ids_unique(self, loaded_controller, fake_directory, factory):
        fake_directory.created_id = 2

        result = await loaded_controller.create(factory.user_data())

        assert result.outcome == SyncOutcome.SYNCED
        assert result.user.id == 4
        ids = [user.id for user in loaded_controller.users]
        assert len(ids) == len(set(ids))


class TestUpdate:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failure,outcome", [
        (None, SyncOutcome.SYNCED),
        (500, SyncOutcome.LOCAL_ONLY),
        ("network", SyncOutcome.LOCAL_ONLY),
    ])
    async def test_update_replaces_record_in_place(self, loaded_controller, fake_directory, factory, failure, outcome):
        fake_directory.fail_with = failure
        data = factory.user_data(name="Updated Name")

        result = await loaded_controller.update("2", data)

        assert result.outcome == outcome
        users = loaded_controller.users
        assert [user.id for user in users] == [1, 2, 3]
        assert users[1].id == 2
        assert users[1].model_dump(exclude={"id"}) == data.model_dump()
        assert fake_directory.methods[-1] == "PUT"

    @pytest.mark.asyncio
    async def test_update_messages(self, loaded_controller, fake_directory, factory):
        synced = await loaded_controller.update(1, factory.user_data())
        fake_directory.fail_with = "network"
        local = await loaded_controller.update(1, factory.user_data())

        assert synced.message == "User updated successfully"
        assert local.message == "User updated locally (API failed)"
        assert local.error

    @pytest.mark.asyncio
    async def test_update_unknown_id_leaves_list_unchanged(self, loaded_controller, factory):
        before = loaded_controller.users

        result = await loaded_controller.update(99, factory.user_data())

        assert result.user is None
        assert loaded_controller.users == before


class TestDelete:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failure,outcome", [
        (None, SyncOutcome.SYNCED),
        (404, SyncOutcome.LOCAL_ONLY),
        ("network", SyncOutcome.LOCAL_ONLY),
    ])
    async def test_delete_removes_record(self, loaded_controller, fake_directory, renderer, failure, outcome):
        fake_directory.fail_with = failure

        result = await loaded_controller.delete(2)

        assert result.outcome == outcome
        assert result.user.id == 2
        assert all(user.id != 2 for user in loaded_controller.users)
        assert [user.id for user in renderer.renders[-1]] == [1, 3]

    @pytest.mark.asyncio
    async def test_delete_messages(self, loaded_controller, fake_directory):
        synced = await loaded_controller.delete(1)
        fake_directory.fail_with = 503
        local = await loaded_controller.delete(2)

        assert synced.message == "User deleted successfully"
        assert local.message == "User deleted locally (API failed)"

    @pytest.mark.asyncio
    async def test_every_operation_renders_and_notifies(self, controller, fake_directory, renderer, factory):
        await controller.load()
        await controller.create(factory.user_data())
        await controller.update(1, factory.user_data())
        await controller.delete(1)

        assert len(renderer.renders) == 4
        assert [n.operation for n in renderer.notifications] == [
            SyncOperation.LOAD, SyncOperation.CREATE, SyncOperation.UPDATE, SyncOperation.DELETE
        ]
