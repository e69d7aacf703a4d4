# gbhw

Building blocks for a Game Boy emulator, in plain Python with no
third-party dependencies:

- `gbhw.bus`: the memory bus, with byte and little-endian word reads and
  the ability to lock address regions, plus named constants for the
  memory map and the DMG I/O registers.
- `gbhw.cartridge`: a reader for the cartridge header at `$0100`–`$014F`:
  the title, the publisher and the header checksum.
- `gbhw.licensee`: lookup tables for the old one-byte and new two-character
  licensee codes.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Memory bus

```python
from gbhw.bus import MemoryBus, Region, LockedMemoryError, VRAM

bus = MemoryBus()
bus.load(rom_bytes)          # copies bytes in from address 0, returns the bus

bus.read8(0x0100)            # one byte (same as bus[0x0100])
bus.read16(0x0102)           # little endian: bus[0x0103] << 8 | bus[0x0102]
bus[0xC000] = 0x42           # write one byte
bus[Region(0x0134, 0x0143)]  # bytes of an inclusive region
bus[0x0134:0x0144]           # the same bytes, as a half-open slice

bus.lock_region(VRAM)
bus[0x8000] = 1              # raises LockedMemoryError
bus.unlock_region(VRAM)
```

The bus holds `MemoryBus.SIZE` (`0xFFFF`) bytes, so valid addresses are
`0x0000`–`0xFFFE`; anything outside that raises `IndexError`. Loading more
than `SIZE` bytes raises `ValueError`, as does writing a value that does not
fit in a byte.

A `Region` is an inclusive address range; creating one with an address
outside 16 bits, or with its start after its end, raises `ValueError`. It
knows its `size()`, supports `address in region`, and `covers(other)` tells
whether it encloses another region.

Locking works as follows:

- writing a single address inside any locked region raises
  `LockedMemoryError`;
- reading a single locked address still returns the byte, and logs a
  warning through the `gbhw.bus` logger;
- reading a region or slice that lies wholly inside a locked region raises
  `LockedMemoryError`;
- `is_address_locked()` and `is_region_locked()` report these conditions;
- `unlock_region()` removes one matching lock and raises `ValueError` if the
  region was never locked.

## Cartridge header

```python
from gbhw.cartridge import CartridgeHeader

header = CartridgeHeader.read_from_bus(bus)
header.title()               # title decoded as UTF-8, trailing NULs removed
header.licensee()            # publisher name, or None if the code is unknown
header.compute_checksum()    # checksum over $0134-$014C
header.validate_checksum()   # True when it matches the byte at $014D
```

`CartridgeHeader(data)` also accepts the 80 header bytes directly; any other
length raises `ValueError`. When the old licensee byte at `$014B` is `$33`,
the publisher is looked up with the new two-character code at
`$0144`–`$0145`; otherwise the old code is used. The module also defines the
addresses and regions of the individual header fields (`TITLE`,
`CARTRIDGE_TYPE`, `HEADER_CHECKSUM` and so on).

## Licensee codes

```python
from gbhw.licensee import old_licensee, new_licensee

old_licensee(0x01)    # "Nintendo"
new_licensee(b"01")   # "Nintendo R&D1"
new_licensee("A4")    # "Konami (Yu-Gi-Oh!)"
```

Both return `None` for an unknown code. `old_licensee(0x33)` raises
`ValueError`, since that value means the new code applies; `new_licensee`
raises `ValueError` unless given exactly two characters.

## What this package does not do

It is not an emulator. There is no CPU, no instruction decoding, no
graphics, sound or input, no memory bank controller handling, and no
command to run a ROM. It provides only the memory bus and the header
reader described above.