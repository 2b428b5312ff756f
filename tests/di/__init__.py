"""Mock providers for testing."""

from .images import MockImagesProvider
from .mail import MockMailProvider
from .notifications import MockNotificationsProvider
from .persistence import MockPersistenceProvider
from .validation import BrokenValidatorsProvider
from .container import build_test_container

__all__ = [
    "BrokenValidatorsProvider",
    "MockImagesProvider",
    "MockMailProvider",
    "MockNotificationsProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
