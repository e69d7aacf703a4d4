import pytest

from gbhw.bus import MemoryBus
from gbhw.cartridge import CartridgeHeader

HEADER_LEN = 0x50


def make_header(title=b"", old_code=0x00, new_code=b"00", checksum=0):
    data = bytearray(HEADER_LEN)
    data[0x34 : 0x34 + len(title)] = title
    data[0x44:0x46] = new_code
    data[0x4B] = old_code
    data[0x4D] = checksum
    return bytes(data)


def test_title_strips_padding():
    header = CartridgeHeader(make_header(title=b"TETRIS"))
    assert header.title() == "TETRIS"


def test_title_full_length():
    header = CartridgeHeader(make_header(title=b"ABCDEFGHIJKLMNOP"))
    assert header.title() == "ABCDEFGHIJKLMNOP"


def test_title_invalid_utf8():
    header = CartridgeHeader(make_header(title=b"\xff\xfe"))
    with pytest.raises(UnicodeDecodeError):
        header.title()


def test_licensee_old_code():
    assert CartridgeHeader(make_header(old_code=0x01)).licensee() == "Nintendo"


def test_licensee_new_code():
    header = CartridgeHeader(make_header(old_code=0x33, new_code=b"A4"))
    assert header.licensee() == "Konami (Yu-Gi-Oh!)"


def test_licensee_unknown_new_code():
    header = CartridgeHeader(make_header(old_code=0x33, new_code=b"ZZ"))
    assert header.licensee() is None


def test_checksum_round_trip():
    raw = make_header(title=b"POKEMON RED", old_code=0x01)
    checksum = CartridgeHeader(raw).compute_checksum()
    header = CartridgeHeader(make_header(title=b"POKEMON RED", old_code=0x01,
                                         checksum=checksum))
    assert header.validate_checksum() is True


def test_checksum_detects_change():
    raw = make_header(title=b"GAME")
    checksum = CartridgeHeader(raw).compute_checksum()
    changed = CartridgeHeader(make_header(title=b"GAMF", checksum=checksum))
    assert changed.validate_checksum() is False


def test_checksum_ignores_bytes_outside_range():
    data = bytearray(make_header(title=b"X"))
    before = CartridgeHeader(bytes(data)).compute_checksum()
    data[0x04] = 0xCE
    data[0x4E] = 0x12
    assert CartridgeHeader(bytes(data)).compute_checksum() == before


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        CartridgeHeader(bytes(HEADER_LEN - 1))


def test_read_from_bus():
    rom = bytearray(0x150)
    rom[0x100:0x150] = make_header(title=b"ZELDA", old_code=0x33, new_code=b"01")
    bus = MemoryBus().load(bytes(rom))
    header = CartridgeHeader.read_from_bus(bus)
    assert header.title() == "ZELDA"
    assert header.licensee() == "Nintendo R&D1"