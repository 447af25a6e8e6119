"""IO exceptions."""


class PreferenceStorageError(Exception):
    """Raised when the preference storage backend cannot be read or written."""
