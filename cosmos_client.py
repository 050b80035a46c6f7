from __future__ import annotations

from azure.cosmos import ContainerProxy, CosmosClient


def get_cosmos_client(endpoint: str, key: str) -> CosmosClient:
    """
    Build a Cosmos client for a single invocation.

    - Credentials come from the caller's request, so nothing is cached
      or shared between invocations.
    - Does not print/log secrets.
    """
    return CosmosClient(endpoint, credential=key)


def get_container(client: CosmosClient, database: str, container: str) -> ContainerProxy:
    # proxies only; no request is sent until an item operation runs
    return client.get_database_client(database).get_container_client(container)
