import logging

from devices import BorrowingDeviceInfoProvider, OwningDeviceInfoProvider, SmartSocket, SmartThermometer
from house import house


def main() -> None:
    """Muestra la especificación de la casa y un informe por cada proveedor."""
    socket1 = SmartSocket()
    socket2 = SmartSocket()
    thermo = SmartThermometer()

    print("House specification:")
    for room in house.get_rooms():
        devices = house.devices(room) or []
        print(f"Room: {room}, Devices: {', '.join(str(d) for d in devices)}")

    print()

    info_provider_1 = OwningDeviceInfoProvider(socket1)
    report1 = house.create_report(info_provider_1)

    info_provider_2 = BorrowingDeviceInfoProvider(socket2, thermo)
    report2 = house.create_report(info_provider_2)

    print(f"Report #1:\n{report1}")
    print(f"Report #2:\n{report2}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    main()
