# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    MediaProvider,
    UserProvider,
    VideoProvider,
    EngagementProvider,
    PlaylistProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depend on the database
    3. Media host (MediaProvider)
    4. Services (User, Video, Engagement, Playlist) - depend on repositories and media
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → media → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        MediaProvider.register(self)
        self.register_services()

    def register_services(self) -> None:
        """Register the application services on top of repositories and media."""
        UserProvider.register(self)
        VideoProvider.register(self)
        EngagementProvider.register(self)
        PlaylistProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[BaseContainer] = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[BaseContainer]) -> None:
    """Replace the global container (None resets it to a lazily built DIContainer)."""
    global _container
    _container = container
