import logging
from typing import Mapping, Optional

from models import DeviceKind

logger = logging.getLogger(__name__)

# Habitaciones que conocen los proveedores por defecto
LIVING_ROOM = "Living Room"
KITCHEN = "Kitchen"


# ========== FUENTES DE ESTADO ==========

class DeviceStatusSource:
    """
    Fuente capaz de responder el estado de un tipo de dispositivo.

    Cada fuente declara su tabla STATUS; la base no reconoce ningún tipo.
    """

    STATUS: Mapping[DeviceKind, str] = {}

    def status_of(self, room: str, device: DeviceKind) -> Optional[str]:
        """Devuelve el estado del dispositivo o None si no lo reconoce."""
        return self.STATUS.get(device)

    def supported_devices(self) -> tuple[DeviceKind, ...]:
        """Tipos de dispositivo que esta fuente sabe responder."""
        return tuple(self.STATUS)


class SmartSocket(DeviceStatusSource):
    """Enchufe inteligente con varias salidas (TV, lámpara, nevera)."""

    STATUS = {
        DeviceKind.TV: "State: On",
        DeviceKind.LAMP: "Luminosity: 70%",
        DeviceKind.FRIDGE: "220w",
    }


class SmartThermometer(DeviceStatusSource):
    """Termómetro inteligente."""

    STATUS = {
        DeviceKind.THERMO: "Temp: 20C",
    }


# ========== PROVEEDORES DE INFORMACIÓN ==========

def _eligibility(rooms, *sources: DeviceStatusSource) -> dict[str, dict[DeviceKind, DeviceStatusSource]]:
    """Construye la tabla habitación -> tipo -> fuente para las habitaciones dadas."""
    table = {}
    for room in rooms:
        entry = {}
        for source in sources:
            for device in source.supported_devices():
                entry.setdefault(device, source)
        table[room] = entry
    return table


class DeviceInfoProvider:
    """
    Resuelve el estado de un dispositivo en una habitación.

    La tabla de elegibilidad indica, por habitación, qué tipos de dispositivo
    pueden consultarse y a qué fuente se delega cada uno. Las variantes con
    y sin propiedad de las fuentes solo difieren en cómo construyen la tabla.
    """

    def __init__(self, eligibility: Mapping[str, Mapping[DeviceKind, DeviceStatusSource]]):
        self._eligibility = {room: dict(entry) for room, entry in eligibility.items()}

    def known_rooms(self) -> list[str]:
        return list(self._eligibility)

    def get_device_status(self, room: str, device: DeviceKind) -> Optional[str]:
        """Estado del dispositivo en la habitación, o None si no es elegible."""
        entry = self._eligibility.get(room)
        if entry is None:
            logger.debug("Habitación desconocida para %s: %s", type(self).__name__, room)
            return None

        source = entry.get(device)
        if source is None:
            logger.debug("Dispositivo %s no elegible en %s", device, room)
            return None

        return source.status_of(room, device)


class OwningDeviceInfoProvider(DeviceInfoProvider):
    """Proveedor dueño exclusivo de su enchufe."""

    def __init__(self, socket: Optional[SmartSocket] = None):
        self._socket = socket if socket is not None else SmartSocket()
        super().__init__(_eligibility((LIVING_ROOM, KITCHEN), self._socket))


class BorrowingDeviceInfoProvider(DeviceInfoProvider):
    """
    Proveedor que usa un enchufe y un termómetro ajenos.

    Las fuentes pertenecen a quien llama y pueden compartirse entre varios
    proveedores; no tienen estado mutable.
    """

    def __init__(self, socket: SmartSocket, thermo: SmartThermometer):
        self.socket = socket
        self.thermo = thermo
        super().__init__(_eligibility((LIVING_ROOM, KITCHEN), socket, thermo))
