"""Shared fixtures for the smart house tests."""
from __future__ import annotations

import pytest

from devices import BorrowingDeviceInfoProvider, OwningDeviceInfoProvider, SmartSocket, SmartThermometer
from house import SmartHouse


@pytest.fixture
def smart_house() -> SmartHouse:
    """Fresh house with the default rooms."""
    return SmartHouse("Test House")


@pytest.fixture
def socket() -> SmartSocket:
    return SmartSocket()


@pytest.fixture
def thermo() -> SmartThermometer:
    return SmartThermometer()


@pytest.fixture
def owning_provider(socket) -> OwningDeviceInfoProvider:
    return OwningDeviceInfoProvider(socket)


@pytest.fixture
def borrowing_provider(socket, thermo) -> BorrowingDeviceInfoProvider:
    return BorrowingDeviceInfoProvider(socket, thermo)
