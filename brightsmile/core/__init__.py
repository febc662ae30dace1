from .storage import InMemoryStorage, PersistResult, StorageUnavailableError
from .theme import ResolutionPhase, ThemePreference, ThemePreferenceStore

__all__ = [
    "InMemoryStorage",
    "PersistResult",
    "ResolutionPhase",
    "StorageUnavailableError",
    "ThemePreference",
    "ThemePreferenceStore",
]
