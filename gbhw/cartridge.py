"""Reading the cartridge header mapped at 0x0100-0x014F."""

from __future__ import annotations

from gbhw.bus import CARTRIDGE_HEADER, MemoryBus, Region
from gbhw.licensee import NEW_LICENSEE_MARKER, new_licensee, old_licensee

START = CARTRIDGE_HEADER.start

ENTRY_POINT = Region(0x0100, 0x0103)
NINTENDO_LOGO = Region(0x0104, 0x0133)
TITLE = Region(0x0134, 0x0143)
MANUFACTURER_CODE = Region(0x013F, 0x0142)
NEW_LICENSEE_CODE = Region(0x0144, 0x0145)
CGB_FLAGS = 0x0146
CARTRIDGE_TYPE = 0x0147
ROM_SIZE = 0x0148
RAM_SIZE = 0x0149
DESTINATION_CODE = 0x014A
OLD_LICENSEE_CODE = 0x014B
ROM_VERSION_NUMBER = 0x014C
HEADER_CHECKSUM = 0x014D
GLOBAL_CHECKSUM = Region(0x014E, 0x014F)

CHECKSUMMED = Region(0x0134, 0x014C)


class CartridgeHeader:
    """A view over the bytes of a cartridge header."""

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) != CARTRIDGE_HEADER.size():
            raise ValueError(
                f"cartridge header must be {CARTRIDGE_HEADER.size()} bytes, "
                f"got {len(data)}"
            )
        self._data = data

    @classmethod
    def read_from_bus(cls, memory_bus: MemoryBus) -> CartridgeHeader:
        return cls(memory_bus[CARTRIDGE_HEADER])

    def _byte(self, address: int) -> int:
        return self._data[address - START]

    def _region(self, region: Region) -> bytes:
        return self._data[region.start - START : region.end - START + 1]

    def title(self) -> str:
        """The game title with trailing NUL padding removed."""
        return self._region(TITLE).decode("utf-8").rstrip("\0")

    def licensee(self) -> str | None:
        """The publisher, using the new code when the old code says so."""
        code = self._byte(OLD_LICENSEE_CODE)
        if code == NEW_LICENSEE_MARKER:
            return new_licensee(self._region(NEW_LICENSEE_CODE))
        return old_licensee(code)

    def compute_checksum(self) -> int:
        """The header checksum over 0x0134-0x014C as the boot ROM computes it."""
        checksum = 0
        for byte in self._region(CHECKSUMMED):
            checksum = (checksum - byte - 1) & 0xFF
        return checksum

    def validate_checksum(self) -> bool:
        return self.compute_checksum() == self._byte(HEADER_CHECKSUM)