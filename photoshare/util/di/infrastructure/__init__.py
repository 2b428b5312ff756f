"""Infrastructure providers."""

# Import bases
from .images import ImagesProvider
from .mail import MailProvider
from .notifications import NotificationsProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .images import ProdImagesProvider  # noqa: F401
from .mail import ProdMailProvider  # noqa: F401
from .notifications import ProdNotificationsProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ImagesProvider",
    "MailProvider",
    "NotificationsProvider",
    "PersistenceProvider",
    "ProdImagesProvider",
    "ProdMailProvider",
    "ProdNotificationsProvider",
    "ProdPersistenceProvider",
]
