import sys
from pathlib import Path

# Añadir directorio raíz al path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

from mcp.server.fastmcp import FastMCP
from devices import BorrowingDeviceInfoProvider, OwningDeviceInfoProvider, SmartSocket, SmartThermometer
from models import DeviceKind
from house import house

mcp = FastMCP("Gestión de la Casa")

# Fuentes compartidas por los proveedores sin propiedad
shared_socket = SmartSocket()
shared_thermo = SmartThermometer()

PROVIDERS = {
    "owning": lambda: OwningDeviceInfoProvider(SmartSocket()),
    "borrowing": lambda: BorrowingDeviceInfoProvider(shared_socket, shared_thermo),
}

# ========== PROMPT ==========

@mcp.prompt()
def house_manager_role() -> str:
    """
    Define el rol y responsabilidades del servidor de gestión de la casa.
    """
    return """
    Eres un asistente especializado en la GESTIÓN DE UNA CASA INTELIGENTE.

    TUS RESPONSABILIDADES:
    - Crear, listar y eliminar habitaciones
    - Añadir y quitar dispositivos de las habitaciones
    - Generar informes de estado de los dispositivos

    TIPOS DE DISPOSITIVOS: TV, Lamp, Fridge, Thermo

    REGLAS IMPORTANTES:
    - Los nombres de habitación son únicos; crear una que ya existe no hace nada
    - Operar sobre una habitación inexistente no es un error, simplemente no hace nada
    - Una habitación puede tener el mismo dispositivo varias veces
    - Proveedores de informe: "owning" (solo enchufe) y "borrowing" (enchufe y termómetro)
    """

# ========== RESOURCES ==========

@mcp.resource("smarthouse://house/state")
def get_house_state() -> str:
    """
    Obtiene el estado actual de todas las habitaciones de la casa.
    """
    output = f"=== CASA: {house.name.upper()} ===\n\n"

    rooms = house.get_rooms()
    if not rooms:
        output += "No hay habitaciones en la casa.\n"
    else:
        for room_name in rooms:
            devices = house.devices(room_name) or []
            output += f"📍 {room_name}\n"
            if devices:
                output += f"   - Dispositivos: {', '.join(str(d) for d in devices)}\n\n"
            else:
                output += "   - Sin dispositivos\n\n"

    output += f"\nTotal: {len(rooms)} habitaciones\n"
    return output

# ========== TOOLS - CONSULTAS ==========

@mcp.tool()
def consultar_habitaciones() -> dict:
    """
    Obtiene la lista de habitaciones con sus dispositivos.

    Returns:
        Nombre de la casa, habitaciones en orden y totales.
    """
    result = []
    for room_name in house.get_rooms():
        devices = house.devices(room_name) or []
        result.append({
            "name": room_name,
            "devices": [str(d) for d in devices],
            "device_count": len(devices)
        })

    return {
        "name": house.name,
        "rooms": result,
        "total_rooms": len(result),
        "total_devices": sum(room["device_count"] for room in result)
    }

@mcp.tool()
def consultar_dispositivos(room_name: str) -> dict:
    """
    Obtiene los dispositivos de una habitación.

    Args:
        room_name: nombre de la habitación

    Returns:
        Lista de dispositivos en orden, o None si la habitación no existe.
    """
    devices = house.devices(room_name)
    return {
        "room": room_name,
        "devices": None if devices is None else [str(d) for d in devices]
    }

@mcp.tool()
def generar_informe(proveedor: str = "borrowing") -> dict:
    """
    Genera el informe de estado de la casa.

    Args:
        proveedor: "owning" (solo enchufe) o "borrowing" (enchufe y termómetro)

    Returns:
        Texto del informe.
    """
    factory = PROVIDERS.get(proveedor)
    if factory is None:
        return {"error": f"Proveedor '{proveedor}' no válido. Usar: {', '.join(PROVIDERS)}"}
    return {"provider": proveedor, "report": house.create_report(factory())}

# ========== TOOLS - GESTIÓN ==========

@mcp.tool()
def agregar_habitacion(room_name: str) -> dict:
    """
    Crea una habitación vacía. Si ya existe no hace nada.

    Args:
        room_name: nombre de la habitación
    """
    house.add_room(room_name)
    return {"rooms": house.get_rooms()}

@mcp.tool()
def eliminar_habitacion(room_name: str) -> dict:
    """
    Elimina una habitación junto con sus dispositivos. Si no existe no hace nada.

    Args:
        room_name: nombre de la habitación a eliminar
    """
    house.remove_room(room_name)
    return {"rooms": house.get_rooms()}

@mcp.tool()
def agregar_dispositivo(room_name: str, device: str) -> dict:
    """
    Añade un dispositivo al final de una habitación.

    Args:
        room_name: nombre de la habitación
        device: tipo de dispositivo (TV, Lamp, Fridge, Thermo)
    """
    kind = DeviceKind.from_label(device)
    if kind is None:
        return {"error": f"Tipo '{device}' inválido. Usar: {', '.join(str(k) for k in DeviceKind)}"}

    house.add_device(room_name, kind)
    return consultar_dispositivos(room_name)

@mcp.tool()
def eliminar_dispositivo(room_name: str, device: str) -> dict:
    """
    Quita todas las apariciones de un dispositivo en una habitación.

    Args:
        room_name: nombre de la habitación
        device: tipo de dispositivo (TV, Lamp, Fridge, Thermo)
    """
    kind = DeviceKind.from_label(device)
    if kind is None:
        return {"error": f"Tipo '{device}' inválido. Usar: {', '.join(str(k) for k in DeviceKind)}"}

    house.remove_device(room_name, kind)
    return consultar_dispositivos(room_name)

if __name__ == "__main__":
    mcp.run(transport="stdio")
