from .crc64 import CRC64, LOOKUP_TABLE, MASK64, POLY64REV, checksum, to_signed

__all__ = ["CRC64", "LOOKUP_TABLE", "MASK64", "POLY64REV", "checksum", "to_signed"]
