from dataclasses import dataclass
from enum import StrEnum
from typing import final


class ResourceType(StrEnum):
    """Kinds of infrastructure objects nestor knows about.

    Values match the spelling used in configuration files. Not every type supports
    policy synthesis, see ``nestor.aws.actions.ACTION_TABLES``.
    """

    S3_BUCKET = "s3Bucket"
    DYNAMODB_TABLE = "dynamoDbTable"
    LAMBDA_FUNCTION = "lambdaFunction"
    COGNITO_USER_POOL = "cognitoUserPool"
    HTTP_API = "httpApi"


@final
@dataclass(frozen=True)
class Resource:
    id: str
    type: ResourceType
    provider_id: str
