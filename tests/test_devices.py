"""Tests for device status sources and info providers."""
from __future__ import annotations

import pytest

from devices import (
    KITCHEN,
    LIVING_ROOM,
    BorrowingDeviceInfoProvider,
    DeviceInfoProvider,
    DeviceStatusSource,
    OwningDeviceInfoProvider,
    SmartSocket,
    SmartThermometer,
)
from models import DeviceKind

ROOMS = [LIVING_ROOM, KITCHEN, "Garage", ""]


class TestDeviceKind:
    """Tests for the device catalog."""

    def test_labels_are_stable(self):
        assert [str(kind) for kind in DeviceKind] == ["TV", "Lamp", "Fridge", "Thermo"]

    def test_from_label_is_case_insensitive(self):
        assert DeviceKind.from_label("lamp") is DeviceKind.LAMP
        assert DeviceKind.from_label(" tv ") is DeviceKind.TV

    def test_from_label_unknown(self):
        assert DeviceKind.from_label("Toaster") is None
        assert DeviceKind.from_label("") is None


class TestSources:
    """Tests for SmartSocket and SmartThermometer."""

    @pytest.mark.parametrize("room", ROOMS)
    def test_socket_answers_its_devices_in_any_room(self, socket, room):
        assert socket.status_of(room, DeviceKind.TV) == "State: On"
        assert socket.status_of(room, DeviceKind.LAMP) == "Luminosity: 70%"
        assert socket.status_of(room, DeviceKind.FRIDGE) == "220w"
        assert socket.status_of(room, DeviceKind.THERMO) is None

    @pytest.mark.parametrize("room", ROOMS)
    def test_thermometer_answers_only_thermo(self, thermo, room):
        assert thermo.status_of(room, DeviceKind.THERMO) == "Temp: 20C"
        for kind in (DeviceKind.TV, DeviceKind.LAMP, DeviceKind.FRIDGE):
            assert thermo.status_of(room, kind) is None

    def test_supported_devices(self, socket, thermo):
        assert socket.supported_devices() == (DeviceKind.TV, DeviceKind.LAMP, DeviceKind.FRIDGE)
        assert thermo.supported_devices() == (DeviceKind.THERMO,)

    def test_base_source_recognizes_nothing(self):
        source = DeviceStatusSource()
        assert source.supported_devices() == ()
        for kind in DeviceKind:
            assert source.status_of(LIVING_ROOM, kind) is None

    def test_sources_share_table_lookup(self, socket, thermo):
        assert type(socket).status_of is DeviceStatusSource.status_of
        assert type(thermo).status_of is DeviceStatusSource.status_of

    def test_custom_source_only_declares_table(self):
        class SmartScale(DeviceStatusSource):
            STATUS = {DeviceKind.FRIDGE: "Weight: 3kg"}

        scale = SmartScale()
        assert scale.status_of(KITCHEN, DeviceKind.FRIDGE) == "Weight: 3kg"
        assert scale.status_of(KITCHEN, DeviceKind.LAMP) is None


class TestProviders:
    """Tests for room/device eligibility and dispatch."""

    def test_unknown_room_has_no_answer(self, owning_provider, borrowing_provider):
        assert owning_provider.get_device_status("Garage", DeviceKind.TV) is None
        assert borrowing_provider.get_device_status("Garage", DeviceKind.THERMO) is None

    def test_owning_provider_ignores_thermo(self, owning_provider):
        assert owning_provider.get_device_status(LIVING_ROOM, DeviceKind.THERMO) is None
        assert owning_provider.get_device_status(KITCHEN, DeviceKind.LAMP) == "Luminosity: 70%"

    def test_borrowing_provider_answers_all_kinds(self, borrowing_provider):
        assert borrowing_provider.get_device_status(KITCHEN, DeviceKind.FRIDGE) == "220w"
        assert borrowing_provider.get_device_status(LIVING_ROOM, DeviceKind.THERMO) == "Temp: 20C"

    def test_known_rooms(self, owning_provider, borrowing_provider):
        assert owning_provider.known_rooms() == [LIVING_ROOM, KITCHEN]
        assert borrowing_provider.known_rooms() == [LIVING_ROOM, KITCHEN]

    @pytest.mark.parametrize("room", ROOMS)
    @pytest.mark.parametrize("device", [DeviceKind.TV, DeviceKind.LAMP, DeviceKind.FRIDGE])
    def test_owning_and_borrowing_agree(self, owning_provider, borrowing_provider, room, device):
        assert owning_provider.get_device_status(room, device) == borrowing_provider.get_device_status(room, device)

    @pytest.mark.parametrize("room", ROOMS)
    @pytest.mark.parametrize("device", list(DeviceKind))
    def test_shared_sources_give_same_answers(self, socket, thermo, room, device):
        first = BorrowingDeviceInfoProvider(socket, thermo)
        second = BorrowingDeviceInfoProvider(socket, thermo)
        assert first.get_device_status(room, device) == second.get_device_status(room, device)

    def test_owning_provider_creates_its_socket(self):
        provider = OwningDeviceInfoProvider()
        assert provider.get_device_status(LIVING_ROOM, DeviceKind.TV) == "State: On"

    def test_custom_eligibility_per_room(self, socket, thermo):
        provider = DeviceInfoProvider({
            "Garage": {DeviceKind.LAMP: socket},
            "Cellar": {DeviceKind.THERMO: thermo},
        })
        assert provider.get_device_status("Garage", DeviceKind.LAMP) == "Luminosity: 70%"
        assert provider.get_device_status("Garage", DeviceKind.TV) is None
        assert provider.get_device_status("Cellar", DeviceKind.THERMO) == "Temp: 20C"
        assert provider.get_device_status(LIVING_ROOM, DeviceKind.LAMP) is None

    def test_eligibility_is_copied(self, socket):
        table = {"Garage": {DeviceKind.LAMP: socket}}
        provider = DeviceInfoProvider(table)
        table["Garage"][DeviceKind.TV] = socket
        assert provider.get_device_status("Garage", DeviceKind.TV) is None
