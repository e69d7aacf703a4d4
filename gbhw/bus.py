"""The Game Boy memory bus.

A 16-bit address bus backed by a flat byte array, with the ability to lock
regions of memory against writes (and reads of whole regions).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ADDRESS_MAX = 0xFFFF


class LockedMemoryError(RuntimeError):
    """Raised when locked memory is accessed in a way that is not allowed."""


@dataclass(frozen=True)
class Region:
    """An inclusive range of bus addresses."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for value in (self.start, self.end):
            if not 0 <= value <= ADDRESS_MAX:
                raise ValueError(f"address {value:#06X} is outside the 16-bit bus")
        if self.start > self.end:
            raise ValueError(
                f"region start {self.start:#06X} is after its end {self.end:#06X}"
            )

    def size(self) -> int:
        """Number of bytes in the region."""
        return self.end + 1 - self.start

    def __contains__(self, address: object) -> bool:
        return isinstance(address, int) and self.start <= address <= self.end

    def covers(self, other: Region) -> bool:
        """True if ``other`` lies entirely within this region."""
        return self.start <= other.start and self.end >= other.end

    def __str__(self) -> str:
        return f"{self.start:#06X}..={self.end:#06X}"


# Jump vectors (0x0000-0x00FF); free for other use when rst/interrupts are unused.
JUMP_VECTORS = Region(0x0000, 0x00FF)
RST_VECTORS = (0x0000, 0x0008, 0x0010, 0x0018, 0x0020, 0x0028, 0x0030, 0x0038)
INTERRUPT_VECTORS = (0x0040, 0x0048, 0x0050, 0x0058, 0x0060)

# ROM
CARTRIDGE_HEADER = Region(0x0100, 0x014F)
ROM_BANK_00 = Region(0x0000, 0x3FFF)
ROM_BANK_NN = Region(0x4000, 0x7FFF)

# RAM
VRAM = Region(0x8000, 0x9FFF)
EXTERNAL_RAM = Region(0xA000, 0xBFFF)
WRAM_FIXED = Region(0xC000, 0xCFFF)
WRAM_SWITCHABLE = Region(0xD000, 0xDFFF)
ECHO_RAM = Region(0xE000, 0xFDFF)
OAM = Region(0xFE00, 0xFE9F)
NOT_USABLE = Region(0xFEA0, 0xFEFF)

# I/O registers (DMG only)
IO_REGISTERS = Region(0xFF00, 0xFF7F)
JOYPAD = 0xFF00
SERIAL_TRANSFER = Region(0xFF01, 0xFF02)
TIMER_AND_DIVIDER = Region(0xFF04, 0xFF07)
AUDIO = Region(0xFF10, 0xFF26)
WAVE_PATTERN = Region(0xFF30, 0xFF3F)

# LCD control, status, position, scrolling and palettes
LCD_REGISTERS = Region(0xFF40, 0xFF4B)
LCDC = 0xFF40
STAT = 0xFF41
SCY = 0xFF42
SCX = 0xFF43
LY = 0xFF44
LYC = 0xFF45
DMA = 0xFF46
BGP = 0xFF47
OBP = (0xFF48, 0xFF49)
WY = 0xFF4A
WX = 0xFF4B

DISABLE_BOOT_ROM = 0xFF50

HRAM = Region(0xFF80, 0xFFFE)
IE = 0xFFFF


class MemoryBus:
    """The byte store behind the Game Boy's address bus."""

    SIZE = ADDRESS_MAX

    def __init__(self) -> None:
        self._bytes = bytearray(self.SIZE)
        self._locked_regions: list[Region] = []

    def load(self, data: bytes) -> MemoryBus:
        """Copy ``data`` to the start of memory."""
        if len(data) > self.SIZE:
            raise ValueError(f"at most {self.SIZE} bytes can be loaded onto the bus")
        self._bytes[: len(data)] = data
        return self

    def read8(self, address: int) -> int:
        return self[address]

    def read16(self, address: int) -> int:
        """Read a little-endian 16-bit value starting at ``address``."""
        return self[address] | (self[address + 1] << 8)

    def lock_region(self, region: Region) -> MemoryBus:
        self._locked_regions.append(region)
        return self

    def unlock_region(self, region: Region) -> MemoryBus:
        try:
            self._locked_regions.remove(region)
        except ValueError:
            raise ValueError(
                f"cannot unlock region {region} that has not been locked"
            ) from None
        return self

    def is_address_locked(self, address: int) -> bool:
        return any(address in region for region in self._locked_regions)

    def is_region_locked(self, region: Region) -> bool:
        return any(locked.covers(region) for locked in self._locked_regions)

    def _check_address(self, address: int) -> None:
        if not 0 <= address < self.SIZE:
            raise IndexError(f"address {address:#06X} is out of bounds")

    def _read_region(self, region: Region) -> bytes:
        if self.is_region_locked(region):
            raise LockedMemoryError(f"reading locked memory at {region}")
        self._check_address(region.end)
        return bytes(self._bytes[region.start : region.end + 1])

    def __getitem__(self, key: int | Region | slice) -> int | bytes:
        if isinstance(key, Region):
            return self._read_region(key)
        if isinstance(key, slice):
            if key.step is not None:
                raise ValueError("stepped slices are not supported")
            if not isinstance(key.start, int) or not isinstance(key.stop, int):
                raise TypeError("slice bounds must be integers")
            if key.stop == key.start:
                self._check_address(key.start) if key.start != self.SIZE else None
                return b""
            if key.stop < key.start:
                raise ValueError("slice stop is before its start")
            return self._read_region(Region(key.start, key.stop - 1))
        if isinstance(key, int):
            self._check_address(key)
            if self.is_address_locked(key):
                logger.warning("Reading locked memory at %#06X", key)
            return self._bytes[key]
        raise TypeError(f"invalid bus index: {key!r}")

    def __setitem__(self, address: int, value: int) -> None:
        self._check_address(address)
        if self.is_address_locked(address):
            raise LockedMemoryError(
                f"writing to locked memory at {address:#06X} is not allowed"
            )
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value {value} does not fit in a byte")
        self._bytes[address] = value