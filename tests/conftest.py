import pytest
from rich.console import Console

from nestor.registry import ResourceRegistry
from nestor.resources import Resource, ResourceType

from .constants import BUCKET_ARN, FUNCTION_ARN, TABLE_ARN


@pytest.fixture
def registry():
    return ResourceRegistry(
        [
            Resource(id="images", type=ResourceType.S3_BUCKET, provider_id=BUCKET_ARN),
            Resource(id="users", type=ResourceType.DYNAMODB_TABLE, provider_id=TABLE_ARN),
            Resource(id="resize", type=ResourceType.LAMBDA_FUNCTION, provider_id=FUNCTION_ARN),
        ]
    )


@pytest.fixture
def recording_console():
    return Console(record=True, width=200, color_system=None, highlight=False)
