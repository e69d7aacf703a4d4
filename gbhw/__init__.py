"""Game Boy memory bus, cartridge header reader and licensee code tables."""

__version__ = "0.1.0"
__all__ = ["bus", "cartridge", "licensee"]