"""Errors reported by the seeder"""


class InputError(ValueError):
    """User supplied a mode or action outside the offered choices"""


class StorageError(RuntimeError):
    """MongoDB connection, insert or delete failed"""
