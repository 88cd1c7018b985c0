from .random_data import ASCII_TABLE_SIZE, BYTE_ASCII_TABLE, generate, shuffle

__all__ = ["ASCII_TABLE_SIZE", "BYTE_ASCII_TABLE", "generate", "shuffle"]
