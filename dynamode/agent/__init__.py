"""
Agent — typed records in and out of a store.

    from dynamode import agent as A

    agent = A.DynamodeAgent(A.MemoryClient(tables=["Cars"]))
    agent = A.DynamodeAgent.connect_local()  # DynamoDB Local via boto3

    await agent.put(car)
    await agent.get(Car, ("tesla", "model-y"))
    await agent.query_by_pk(Car, "tesla")
"""

from dynamode.agent._errors import AgentError, AgentErrorKind
from dynamode.agent._model import DynamoModel, DataclassModel
from dynamode.agent._client import StoreClient, MemoryClient, TableNotFound
from dynamode.agent._settings import (
    Settings,
    get_settings,
    DEFAULT_ENDPOINT_URL,
    DEFAULT_REGION,
)
from dynamode.agent._agent import DynamodeAgent, Keys
from dynamode.agent._boto3 import Boto3Client

__all__ = (
    # Errors
    "AgentError",
    "AgentErrorKind",
    # Records
    "DynamoModel",
    "DataclassModel",
    # Clients
    "StoreClient",
    "MemoryClient",
    "TableNotFound",
    "Boto3Client",
    # Settings
    "Settings",
    "get_settings",
    "DEFAULT_ENDPOINT_URL",
    "DEFAULT_REGION",
    # Agent
    "DynamodeAgent",
    "Keys",
)
