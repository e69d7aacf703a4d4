import pytest

from gbhw.licensee import new_licensee, old_licensee


@pytest.mark.parametrize(
    "code, name",
    [
        (0x00, "None"),
        (0x01, "Nintendo"),
        (0x34, "Konami"),
        (0xA4, "Konami"),
        (0xFF, "LJN"),
        (0xC3, "Squaresoft"),
    ],
)
def test_old_licensee_known(code, name):
    assert old_licensee(code) == name


@pytest.mark.parametrize("code", [0x02, 0x5E, 0xFE])
def test_old_licensee_unknown(code):
    assert old_licensee(code) is None


def test_old_licensee_rejects_new_marker():
    with pytest.raises(ValueError):
        old_licensee(0x33)


@pytest.mark.parametrize(
    "code, name",
    [
        (b"01", "Nintendo R&D1"),
        (b"9H", "Bottom Up"),
        (b"A4", "Konami (Yu-Gi-Oh!)"),
        (b"33", "Ocean/Acclaim"),
    ],
)
def test_new_licensee_known(code, name):
    assert new_licensee(code) == name


def test_new_licensee_accepts_str():
    assert new_licensee("78") == new_licensee(b"78") == "THQ"


def test_new_licensee_unknown():
    assert new_licensee(b"ZZ") is None


@pytest.mark.parametrize("code", [b"", b"1", b"123"])
def test_new_licensee_wrong_length(code):
    with pytest.raises(ValueError):
        new_licensee(code)