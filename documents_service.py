from __future__ import annotations

import logging
from typing import Any, Optional

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from cosmos_client import get_container, get_cosmos_client

logger = logging.getLogger(__name__)


class DocumentNotFound(Exception):
    """Raised when Cosmos answers a point-read with 404."""


def read_document(
    endpoint: str,
    key: str,
    database: str,
    container: str,
    document_id: str,
    partition_key: Optional[Any] = None,
) -> Optional[dict[str, Any]]:
    """
    Point-read one document by id and partition key.

    Returns:
      - the document body as stored (system properties included)

    Raises:
      - DocumentNotFound if the item does not exist
      - Exceptions for unexpected issues (caller should translate to 500)
    """
    # the client owns a connection pool; close it before the invocation ends
    with get_cosmos_client(endpoint, key) as client:
        proxy = get_container(client, database, container)

        logger.debug("Reading document %s from %s/%s", document_id, database, container)
        try:
            return proxy.read_item(item=document_id, partition_key=partition_key)
        except CosmosResourceNotFoundError as e:
            raise DocumentNotFound(str(e)) from e
