from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Self, final

from nestor.resources import ResourceType


class Operation(StrEnum):
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    QUERY = "query"
    # Anything not listed above. Never present in an action table.
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, name: str) -> Self:
        """Map an operation name from configuration to its member.

        Names are case-sensitive. Unknown names, including the literal "unrecognized",
        become ``UNRECOGNIZED`` so that they always fail table lookup.
        """
        try:
            return cls(name)
        except ValueError:
            return cls.UNRECOGNIZED


@final
@dataclass(frozen=True)
class ActionTable:
    """Provider actions granted by each operation on one resource type.

    Attributes:
        kind: Human-readable resource kind used in error messages.
        actions: Operation to actions, in the order they are written to a statement.
    """

    kind: str
    actions: Mapping[Operation, Sequence[str]]

    def actions_for(self, operation: Operation) -> Sequence[str] | None:
        return self.actions.get(operation)


S3_BUCKET_ACTIONS = ActionTable(
    kind="bucket",
    actions={
        Operation.READ: ("s3:GetObject",),
        Operation.WRITE: ("s3:PutObject",),
        Operation.DELETE: ("s3:DeleteObject",),
    },
)

DYNAMODB_TABLE_ACTIONS = ActionTable(
    kind="dynamo table",
    actions={
        Operation.READ: ("dynamodb:GetItem",),
        Operation.QUERY: ("dynamodb:Query",),
        Operation.WRITE: ("dynamodb:PutItem", "dynamodb:UpdateItem"),
        Operation.DELETE: ("dynamodb:DeleteItem",),
    },
)

# Resource types missing here cannot be granted to a function.
ACTION_TABLES: Mapping[ResourceType, ActionTable] = MappingProxyType(
    {
        ResourceType.S3_BUCKET: S3_BUCKET_ACTIONS,
        ResourceType.DYNAMODB_TABLE: DYNAMODB_TABLE_ACTIONS,
    }
)
