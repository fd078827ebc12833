import logging
from typing import Optional

from devices import DeviceInfoProvider
from models import DeviceKind, Room

logger = logging.getLogger(__name__)


class SmartHouse:
    """Registro en memoria de habitaciones y dispositivos de una casa."""

    # Topología inicial
    DEFAULT_ROOMS = (
        ("Living Room", (DeviceKind.TV, DeviceKind.LAMP, DeviceKind.THERMO)),
        ("Kitchen", (DeviceKind.LAMP, DeviceKind.THERMO, DeviceKind.FRIDGE)),
    )

    # Formato del informe
    REPORT_HEADER = "House: {name}"
    REPORT_LINE = "Room: {room}, Device: {device}, Info: {status}"

    def __init__(self, name: str):
        """Crea la casa con las habitaciones por defecto."""
        self._name = name
        self.rooms: list[Room] = [
            Room(name=room_name, devices=list(devices))
            for room_name, devices in self.DEFAULT_ROOMS
        ]

    @property
    def name(self) -> str:
        return self._name

    def _find_room(self, name: str) -> Optional[Room]:
        for room in self.rooms:
            if room.name == name:
                return room
        return None

    # ========== GESTIÓN DE HABITACIONES ==========

    def get_rooms(self) -> list[str]:
        """Nombres de las habitaciones en orden de inserción."""
        return [room.name for room in self.rooms]

    def add_room(self, name: str) -> None:
        """Añade una habitación vacía al final. No hace nada si ya existe."""
        if not name:
            logger.debug("Nombre de habitación vacío, se ignora")
            return
        if self._find_room(name) is not None:
            logger.debug("La habitación '%s' ya existe", name)
            return

        self.rooms.append(Room(name=name))
        logger.info("Habitación '%s' creada en %s", name, self._name)

    def remove_room(self, name: str) -> None:
        """Elimina la habitación (y sus dispositivos). No hace nada si no existe."""
        remaining = [room for room in self.rooms if room.name != name]
        if len(remaining) == len(self.rooms):
            logger.debug("La habitación '%s' no existe", name)
            return

        self.rooms = remaining
        logger.info("Habitación '%s' eliminada de %s", name, self._name)

    # ========== GESTIÓN DE DISPOSITIVOS ==========

    def devices(self, room_name: str) -> Optional[list[DeviceKind]]:
        """Copia de los dispositivos de la habitación, o None si no existe."""
        room = self._find_room(room_name)
        if room is None:
            return None
        return list(room.devices)

    def add_device(self, room_name: str, device: DeviceKind) -> None:
        """Añade un dispositivo al final de la habitación (se admiten duplicados)."""
        room = self._find_room(room_name)
        if room is None:
            logger.debug("No se añade %s: la habitación '%s' no existe", device, room_name)
            return

        room.devices.append(device)
        logger.info("Dispositivo %s añadido a '%s'", device, room_name)

    def remove_device(self, room_name: str, device: DeviceKind) -> None:
        """Quita todas las apariciones del dispositivo en la habitación."""
        room = self._find_room(room_name)
        if room is None:
            logger.debug("No se quita %s: la habitación '%s' no existe", device, room_name)
            return

        before = len(room.devices)
        room.devices = [d for d in room.devices if d != device]
        if len(room.devices) != before:
            logger.info("Dispositivo %s eliminado de '%s'", device, room_name)

    # ========== INFORMES ==========

    def create_report(self, provider: DeviceInfoProvider) -> str:
        """
        Genera el informe de estado de la casa.

        Recorre las habitaciones y sus dispositivos en el orden guardado y
        añade una línea por cada par que el proveedor sabe responder. Los
        pares sin respuesta se omiten.
        """
        lines = [self.REPORT_HEADER.format(name=self._name)]
        for room in self.rooms:
            for device in room.devices:
                status = provider.get_device_status(room.name, device)
                if status is None:
                    logger.debug("Sin información para %s en '%s'", device, room.name)
                    continue
                lines.append(self.REPORT_LINE.format(room=room.name, device=device, status=status))
        return "\n".join(lines)


# Instancia global
house = SmartHouse("my house")
