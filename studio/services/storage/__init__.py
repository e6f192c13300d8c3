from .local import LocalStorage, LocalStorageError

__all__ = ["LocalStorage", "LocalStorageError"]
