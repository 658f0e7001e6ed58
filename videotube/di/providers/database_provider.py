from typing import TYPE_CHECKING

from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Database connection provider - the one place the Mongo client is created"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client manager under the "mongo_client" key.
        Repositories receive it from here instead of opening their own connection.
        """
        container.register_singleton("mongo_client", get_mongo_client())
