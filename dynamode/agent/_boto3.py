"""
boto3 integration — StoreClient over the low-level DynamoDB client.

Usage:
    client = Boto3Client.connect_local()          # DynamoDB Local
    client = Boto3Client(boto3.client("dynamodb"))  # anything boto3 builds

    agent = DynamodeAgent(client)

boto3 is blocking, so every call runs in asyncio.to_thread.
"""

from __future__ import annotations

import asyncio
from typing import Any

import boto3

from dynamode.agent._settings import Settings, get_settings
from dynamode.codec._key import PARTITION_KEY
from dynamode.wire._types import Item
from dynamode.wire._json import item_to_json, item_from_json


class Boto3Client:
    """
    StoreClient backed by a boto3 `dynamodb` client.

    Note: Reads return one page only. Pagination is the caller's concern.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @property
    def client(self) -> Any:
        """The wrapped boto3 client, for table admin and anything else."""
        return self._client

    @classmethod
    def connect_local(cls, settings: Settings | None = None) -> Boto3Client:
        """
        Connect to DynamoDB Local (http://localhost:8000, us-west-2 unless
        DYNAMODE_ENDPOINT_URL / DYNAMODE_REGION say otherwise).
        """
        settings = settings or get_settings()
        client = boto3.client(
            "dynamodb",
            region_name=settings.region,
            endpoint_url=settings.endpoint_url,
        )
        return cls(client)

    async def put_item(self, table: str, item: Item) -> None:
        await asyncio.to_thread(
            self._client.put_item,
            TableName=table,
            Item=item_to_json(item),
        )

    async def get_item(self, table: str, key: Item) -> Item | None:
        response = await asyncio.to_thread(
            self._client.get_item,
            TableName=table,
            Key=item_to_json(key),
        )
        raw = response.get("Item")
        return item_from_json(raw) if raw is not None else None

    async def delete_item(self, table: str, key: Item) -> None:
        await asyncio.to_thread(
            self._client.delete_item,
            TableName=table,
            Key=item_to_json(key),
        )

    async def query(self, table: str, partition: str) -> list[Item]:
        response = await asyncio.to_thread(
            self._client.query,
            TableName=table,
            KeyConditionExpression="#pk = :pk_val",
            ExpressionAttributeNames={"#pk": PARTITION_KEY},
            ExpressionAttributeValues={":pk_val": {"S": partition}},
        )
        return [item_from_json(raw) for raw in response.get("Items", [])]

    async def scan(self, table: str) -> list[Item]:
        response = await asyncio.to_thread(self._client.scan, TableName=table)
        return [item_from_json(raw) for raw in response.get("Items", [])]


__all__ = ("Boto3Client",)
