# webapp/db.py

import atexit
import logging
from typing import Any, Callable, Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .errors import DatabaseConnectionError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "app"


class MongoConnector:
    """
    One shared MongoClient for the whole process.

    connect() pings the server right away, so an unreachable database
    fails startup instead of the first request. There is no retry.

    With force_close on, the client is closed at interpreter exit no
    matter what is still in flight.
    """

    def __init__(
        self,
        uri: str,
        force_close: bool = True,
        server_selection_timeout_ms: int = 5000,
        database: Optional[str] = None,
        client_factory: Optional[Callable[..., Any]] = None,
    ):
        self.uri = uri
        self.force_close = force_close
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.database = database
        self._client_factory = client_factory or MongoClient
        self._client: Optional[MongoClient] = None

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            raise RuntimeError("MongoConnector.connect() has not been called")
        return self._client

    @property
    def db(self) -> Database:
        # database in the URI path wins over MONGODB_DATABASE
        return self.client.get_default_database(default=self.database or DEFAULT_DATABASE)

    def connect(self) -> "MongoConnector":
        # bad URI options (port, timeouts) surface as ValueError/TypeError
        client = None
        try:
            client = self._client_factory(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
            client.admin.command("ping")
        except (PyMongoError, ValueError, TypeError) as exc:
            if client is not None:
                client.close()
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {exc}") from exc

        self._client = client
        if self.force_close:
            atexit.register(self.close)

        logger.info("Connected to MongoDB (database=%s)", self.db.name)
        return self

    def ping(self) -> bool:
        try:
            self.client.admin.command("ping")
        except PyMongoError:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False
        return True

    def close(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        atexit.unregister(self.close)
        logger.info("MongoDB client closed")
