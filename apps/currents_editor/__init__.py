from apps.currents_editor.store import EntryStore, EntryStoreError, safe_basename, slugify

__all__ = [
    "EntryStore",
    "EntryStoreError",
    "safe_basename",
    "slugify",
]
