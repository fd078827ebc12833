from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class DeviceKind(str, Enum):
    """Tipos de dispositivo soportados por la casa."""
    TV = "TV"
    LAMP = "Lamp"
    FRIDGE = "Fridge"
    THERMO = "Thermo"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> Optional["DeviceKind"]:
        """Convierte una etiqueta ("lamp", " TV ") en tipo; None si no existe."""
        wanted = label.strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        return None


@dataclass
class Room:
    """Habitación que contiene dispositivos."""
    name: str
    devices: list[DeviceKind] = field(default_factory=list)  # orden de inserción, admite duplicados
