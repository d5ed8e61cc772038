"""
Unit tests for DeviceService against a mocked repository.
"""
from datetime import datetime, timezone

import pytest

from device_inventory.modules.devices import (
    Device,
    DeviceCreateInput,
    DeviceErrorKind,
    DeviceFilter,
    DeviceService,
    DeviceState,
    DeviceUpdateInput,
)

CREATED_AT = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def _make_device(
    device_id: str = "dev-1",
    name: str = "iPhone 15",
    brand: str = "Apple",
    state: DeviceState = DeviceState.AVAILABLE,
) -> Device:
    return Device(id=device_id, name=name, brand=brand, state=state, creation_time=CREATED_AT)


class TestCreateDevice:
    @pytest.mark.asyncio
    async def test_create_never_passes_identity_to_storage(self, repository):
        repository.save.side_effect = lambda device: Device(
            id="generated", name=device.name, brand=device.brand, state=device.state, creation_time=CREATED_AT
        )
        service = DeviceService(repository)

        result = await service.create_device(DeviceCreateInput("iPhone 15", "Apple", DeviceState.AVAILABLE))

        saved = repository.save.await_args.args[0]
        assert saved.id is None
        assert saved.creation_time is None
        assert result.is_success()
        assert result.value.id == "generated"
        assert result.value.creation_time == CREATED_AT

    @pytest.mark.asyncio
    async def test_create_accepts_in_use_state(self, repository):
        service = DeviceService(repository)
        result = await service.create_device(DeviceCreateInput("Pixel", "Google", DeviceState.IN_USE))
        assert result.value.state is DeviceState.IN_USE


class TestGetDevice:
    @pytest.mark.asyncio
    async def test_get_found(self, repository):
        repository.find_by_id.return_value = _make_device()
        result = await DeviceService(repository).get_device("dev-1")
        assert result.is_success()
        assert result.value.name == "iPhone 15"

    @pytest.mark.asyncio
    async def test_get_not_found(self, repository):
        repository.find_by_id.return_value = None
        result = await DeviceService(repository).get_device("missing")
        assert result.is_failure()
        assert result.failure.kind is DeviceErrorKind.NOT_FOUND
        assert result.failure.message == "Device not found with id: missing"


class TestListDevices:
    @pytest.mark.asyncio
    async def test_no_filter_lists_all(self, repository):
        repository.find_all.return_value = [_make_device("a"), _make_device("b")]
        devices = await DeviceService(repository).list_devices()
        assert [device.id for device in devices] == ["a", "b"]
        repository.find_all.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_brand_only(self, repository):
        repository.find_by_brand.return_value = []
        await DeviceService(repository).list_devices(DeviceFilter(brand="Apple"))
        repository.find_by_brand.assert_awaited_once_with("Apple")
        repository.find_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_state_only(self, repository):
        repository.find_by_state.return_value = []
        await DeviceService(repository).list_devices(DeviceFilter(state=DeviceState.IN_USE))
        repository.find_by_state.assert_awaited_once_with(DeviceState.IN_USE)

    @pytest.mark.asyncio
    async def test_brand_and_state(self, repository):
        repository.find_by_brand_and_state.return_value = [_make_device()]
        devices = await DeviceService(repository).list_devices(
            DeviceFilter(brand="Apple", state=DeviceState.AVAILABLE)
        )
        assert len(devices) == 1
        repository.find_by_brand_and_state.assert_awaited_once_with("Apple", DeviceState.AVAILABLE)

    @pytest.mark.asyncio
    async def test_empty_brand_is_still_a_constraint(self, repository):
        repository.find_by_brand.return_value = []
        await DeviceService(repository).list_devices(DeviceFilter(brand=""))
        repository.find_by_brand.assert_awaited_once_with("")


class TestUpdateDevice:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("state", [DeviceState.AVAILABLE, DeviceState.INACTIVE])
    async def test_update_all_fields_when_not_in_use(self, repository, state):
        repository.find_by_id.return_value = _make_device(state=state)
        service = DeviceService(repository)

        result = await service.update_device(
            "dev-1", DeviceUpdateInput(name="iPhone 15 Pro", brand="Apple Inc", state=DeviceState.IN_USE)
        )

        assert result.is_success()
        updated = result.value
        assert (updated.name, updated.brand, updated.state) == ("iPhone 15 Pro", "Apple Inc", DeviceState.IN_USE)
        assert updated.id == "dev-1"
        assert updated.creation_time == CREATED_AT

    @pytest.mark.asyncio
    async def test_absent_fields_left_unchanged(self, repository):
        repository.find_by_id.return_value = _make_device()
        result = await DeviceService(repository).update_device("dev-1", DeviceUpdateInput(brand="Apple Inc"))
        assert result.value.name == "iPhone 15"
        assert result.value.brand == "Apple Inc"
        assert result.value.state is DeviceState.AVAILABLE

    @pytest.mark.asyncio
    async def test_state_only_change_when_in_use(self, repository):
        repository.find_by_id.return_value = _make_device(state=DeviceState.IN_USE)
        result = await DeviceService(repository).update_device(
            "dev-1", DeviceUpdateInput(state=DeviceState.INACTIVE)
        )
        assert result.is_success()
        assert result.value.state is DeviceState.INACTIVE
        assert result.value.name == "iPhone 15"
        assert result.value.brand == "Apple"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            DeviceUpdateInput(name="New"),
            DeviceUpdateInput(brand="New"),
            DeviceUpdateInput(name="New", brand="New", state=DeviceState.AVAILABLE),
        ],
    )
    async def test_in_use_rejects_name_or_brand_without_saving(self, repository, payload):
        repository.find_by_id.return_value = _make_device(state=DeviceState.IN_USE)
        result = await DeviceService(repository).update_device("dev-1", payload)
        assert result.is_failure()
        assert result.failure.kind is DeviceErrorKind.DEVICE_IN_USE
        repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_missing_device(self, repository):
        repository.find_by_id.return_value = None
        result = await DeviceService(repository).update_device("missing", DeviceUpdateInput(name="X"))
        assert result.failure.kind is DeviceErrorKind.NOT_FOUND
        repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_loaded_snapshot_is_not_mutated(self, repository):
        current = _make_device()
        repository.find_by_id.return_value = current
        await DeviceService(repository).update_device("dev-1", DeviceUpdateInput(name="Other"))
        assert current.name == "iPhone 15"

    @pytest.mark.asyncio
    async def test_partial_update_follows_same_rules(self, repository):
        repository.find_by_id.return_value = _make_device(state=DeviceState.IN_USE)
        service = DeviceService(repository)

        rejected = await service.partial_update_device("dev-1", DeviceUpdateInput(name="X"))
        accepted = await service.partial_update_device("dev-1", DeviceUpdateInput(state=DeviceState.AVAILABLE))

        assert rejected.failure.kind is DeviceErrorKind.DEVICE_IN_USE
        assert accepted.value.state is DeviceState.AVAILABLE


class TestDeleteDevice:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("state", [DeviceState.AVAILABLE, DeviceState.INACTIVE])
    async def test_delete_when_not_in_use(self, repository, state):
        device = _make_device(state=state)
        repository.find_by_id.return_value = device
        result = await DeviceService(repository).delete_device("dev-1")
        assert result.is_success()
        repository.delete.assert_awaited_once_with(device)

    @pytest.mark.asyncio
    async def test_delete_in_use_rejected(self, repository):
        repository.find_by_id.return_value = _make_device(state=DeviceState.IN_USE)
        result = await DeviceService(repository).delete_device("dev-1")
        assert result.failure.kind is DeviceErrorKind.DEVICE_IN_USE
        repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing_device(self, repository):
        repository.find_by_id.return_value = None
        result = await DeviceService(repository).delete_device("missing")
        assert result.failure.kind is DeviceErrorKind.NOT_FOUND
        repository.delete.assert_not_awaited()


class TestStorageFailures:
    @pytest.mark.asyncio
    async def test_storage_errors_propagate(self, repository):
        repository.find_by_id.side_effect = RuntimeError("database unavailable")
        with pytest.raises(RuntimeError, match="database unavailable"):
            await DeviceService(repository).get_device("dev-1")
