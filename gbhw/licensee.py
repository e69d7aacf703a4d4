"""Publisher names for the licensee codes in a cartridge header."""

from __future__ import annotations

NEW_LICENSEE_MARKER = 0x33

_OLD_LICENSEES: dict[int, str] = {
    0x00: "None",
    0x01: "Nintendo",
    0x08: "Capcom",
    0x09: "Hot-B",
    0x0A: "Jaleco",
    0x0B: "Coconuts Japan",
    0x0C: "Elite Systems",
    0x13: "EA (Electronic Arts)",
    0x18: "Hudsonsoft",
    0x19: "ITC Entertainment",
    0x1A: "Yanoman",
    0x1D: "Japan Clary",
    0x1F: "Virgin Interactive",
    0x24: "PCM Complete",
    0x25: "San-X",
    0x28: "Kotobuki Systems",
    0x29: "Seta",
    0x30: "Infogrames",
    0x31: "Nintendo",
    0x32: "Bandai",
    0x34: "Konami",
    0x35: "HectorSoft",
    0x38: "Capcom",
    0x39: "Banpresto",
    0x3C: ".Entertainment i",
    0x3E: "Gremlin",
    0x41: "Ubisoft",
    0x42: "Atlus",
    0x44: "Malibu",
    0x46: "Angel",
    0x47: "Spectrum Holoby",
    0x49: "Irem",
    0x4A: "Virgin Interactive",
    0x4D: "Malibu",
    0x4F: "U.S. Gold",
    0x50: "Absolute",
    0x51: "Acclaim",
    0x52: "Activision",
    0x53: "American Sammy",
    0x54: "GameTek",
    0x55: "Park Place",
    0x56: "LJN",
    0x57: "Matchbox",
    0x59: "Milton Bradley",
    0x5A: "Mindscape",
    0x5B: "Romstar",
    0x5C: "Naxat Soft",
    0x5D: "Tradewest",
    0x60: "Titus",
    0x61: "Virgin Interactive",
    0x67: "Ocean Interactive",
    0x69: "EA (Electronic Arts)",
    0x6E: "Elite Systems",
    0x6F: "Electro Brain",
    0x70: "Infogrames",
    0x71: "Interplay",
    0x72: "Broderbund",
    0x73: "Sculptered Soft",
    0x75: "The Sales Curve",
    0x78: "t.hq",
    0x79: "Accolade",
    0x7A: "Triffix Entertainment",
    0x7C: "Microprose",
    0x7F: "Kemco",
    0x80: "Misawa Entertainment",
    0x83: "Lozc",
    0x86: "Tokuma Shoten Intermedia",
    0x8B: "Bullet-Proof Software",
    0x8C: "Vic Tokai",
    0x8E: "Ape",
    0x8F: "I'Max",
    0x91: "Chunsoft Co.",
    0x92: "Video System",
    0x93: "Tsubaraya Productions Co.",
    0x95: "Varie Corporation",
    0x96: "Yonezawa/S'Pal",
    0x97: "Kaneko",
    0x99: "Arc",
    0x9A: "Nihon Bussan",
    0x9B: "Tecmo",
    0x9C: "Imagineer",
    0x9D: "Banpresto",
    0x9F: "Nova",
    0xA1: "Hori Electric",
    0xA2: "Bandai",
    0xA4: "Konami",
    0xA6: "Kawada",
    0xA7: "Takara",
    0xA9: "Technos Japan",
    0xAA: "Broderbund",
    0xAC: "Toei Animation",
    0xAD: "Toho",
    0xAF: "Namco",
    0xB0: "acclaim",
    0xB1: "ASCII or Nexsoft",
    0xB2: "Bandai",
    0xB4: "Square Enix",
    0xB6: "HAL Laboratory",
    0xB7: "SNK",
    0xB9: "Pony Canyon",
    0xBA: "Culture Brain",
    0xBB: "Sunsoft",
    0xBD: "Sony Imagesoft",
    0xBF: "Sammy",
    0xC0: "Taito",
    0xC2: "Kemco",
    0xC3: "Squaresoft",
    0xC4: "Tokuma Shoten Intermedia",
    0xC5: "Data East",
    0xC6: "Tonkinhouse",
    0xC8: "Koei",
    0xC9: "UFL",
    0xCA: "Ultra",
    0xCB: "Vap",
    0xCC: "Use Corporation",
    0xCD: "Meldac",
    0xCE: ".Pony Canyon or",
    0xCF: "Angel",
    0xD0: "Taito",
    0xD1: "Sofel",
    0xD2: "Quest",
    0xD3: "Sigma Enterprises",
    0xD4: "ASK Kodansha Co.",
    0xD6: "Naxat Soft",
    0xD7: "Copya System",
    0xD9: "Banpresto",
    0xDA: "Tomy",
    0xDB: "LJN",
    0xDD: "NCS",
    0xDE: "Human",
    0xDF: "Altron",
    0xE0: "Jaleco",
    0xE1: "Towa Chiki",
    0xE2: "Yutaka",
    0xE3: "Varie",
    0xE5: "Epcoh",
    0xE7: "Athena",
    0xE8: "Asmik ACE Entertainment",
    0xE9: "Natsume",
    0xEA: "King Records",
    0xEB: "Atlus",
    0xEC: "Epic/Sony Records",
    0xEE: "IGS",
    0xF0: "A Wave",
    0xF3: "Extreme Entertainment",
    0xFF: "LJN",
}

_NEW_LICENSEES: dict[bytes, str] = {
    b"00": "None",
    b"01": "Nintendo R&D1",
    b"08": "Capcom",
    b"13": "Electronic Arts",
    b"18": "Hudson Soft",
    b"19": "b-ai",
    b"20": "kss",
    b"22": "pow",
    b"24": "PCM Complete",
    b"25": "san-x",
    b"28": "Kemco Japan",
    b"29": "seta",
    b"30": "Viacom",
    b"31": "Nintendo",
    b"32": "Bandai",
    b"33": "Ocean/Acclaim",
    b"34": "Konami",
    b"35": "Hector",
    b"37": "Taito",
    b"38": "Hudson",
    b"39": "Banpresto",
    b"41": "Ubi Soft",
    b"42": "Atlus",
    b"44": "Malibu",
    b"46": "angel",
    b"47": "Bullet-Proof",
    b"49": "irem",
    b"50": "Absolute",
    b"51": "Acclaim",
    b"52": "Activision",
    b"53": "American sammy",
    b"54": "Konami",
    b"55": "Hi tech entertainment",
    b"56": "LJN",
    b"57": "Matchbox",
    b"58": "Mattel",
    b"59": "Milton Bradley",
    b"60": "Titus",
    b"61": "Virgin",
    b"64": "LucasArts",
    b"67": "Ocean",
    b"69": "Electronic Arts",
    b"70": "Infogrames",
    b"71": "Interplay",
    b"72": "Broderbund",
    b"73": "sculptured",
    b"75": "sci",
    b"78": "THQ",
    b"79": "Accolade",
    b"80": "misawa",
    b"83": "lozc",
    b"86": "Tokuma Shoten Intermedia",
    b"87": "Tsukuda Original",
    b"91": "Chunsoft",
    b"92": "Video system",
    b"93": "Ocean/Acclaim",
    b"95": "Varie",
    b"96": "Yonezawa/s'pal",
    b"97": "Kaneko",
    b"99": "Pack in soft",
    b"9H": "Bottom Up",
    b"A4": "Konami (Yu-Gi-Oh!)",
}


def old_licensee(code: int) -> str | None:
    """Publisher for an old (single byte) licensee code, or None if unknown.

    The code 0x33 means the new licensee code applies and is rejected here.
    """
    if code == NEW_LICENSEE_MARKER:
        raise ValueError("code 0x33 refers to the new licensee code table")
    return _OLD_LICENSEES.get(code)


def new_licensee(code: bytes | str) -> str | None:
    """Publisher for a two-character new licensee code, or None if unknown."""
    if isinstance(code, str):
        code = code.encode("ascii")
    code = bytes(code)
    if len(code) != 2:
        raise ValueError("new licensee code must be exactly 2 bytes long")
    return _NEW_LICENSEES.get(code)