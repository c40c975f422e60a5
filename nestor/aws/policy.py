import logging
from collections.abc import Mapping, Sequence

from nestor.aws.actions import ACTION_TABLES, ActionTable, Operation
from nestor.aws.permission import ALLOW, PolicyStatement
from nestor.config import PermissionGrant
from nestor.exceptions import (
    UnknownResourceError,
    UnsupportedOperationError,
    UnsupportedResourceTypeError,
)
from nestor.registry import ResourceRegistry
from nestor.reporter import Task
from nestor.resources import Resource, ResourceType

logger = logging.getLogger(__name__)


class PolicySynthesizer:
    """Turn permission grants into IAM policy statements for a Lambda function.

    Each grant becomes exactly one statement. Grants are never merged, even when they
    target the same resource, and actions are neither sorted nor deduplicated.

    Synthesis is all-or-nothing: the first grant that cannot be resolved or mapped
    raises and no statements are returned.
    """

    def __init__(
        self,
        registry: ResourceRegistry,
        action_tables: Mapping[ResourceType, ActionTable] = ACTION_TABLES,
        task: Task | None = None,
    ):
        self.registry = registry
        self.action_tables = action_tables
        self.task = task

    def synthesize(self, grants: Sequence[PermissionGrant]) -> list[PolicyStatement]:
        """Build one statement per grant, in grant order.

        Raises:
            UnknownResourceError: A grant references an id missing from the registry.
            UnsupportedResourceTypeError: The resource's type has no action table.
            UnsupportedOperationError: An operation is not in the type's action table.
        """
        statements = []
        for grant in grants:
            resource = self.registry.lookup(grant.resource_id)
            if resource is None:
                raise UnknownResourceError(grant.resource_id)

            actions = self._actions_for(resource, grant.operations)
            logger.debug(
                "Granting %s on '%s' (%s)", ", ".join(actions), resource.id, resource.type
            )
            if self.task:
                self.task.log(
                    resource.id,
                    {"resource": resource.provider_id, "actions": ", ".join(actions)},
                )
            statements.append(
                PolicyStatement(effect=ALLOW, resource=resource.provider_id, actions=actions)
            )

        logger.info("Synthesized %d policy statements", len(statements))
        return statements

    def _actions_for(self, resource: Resource, operations: Sequence[str]) -> tuple[str, ...]:
        table = self.action_tables.get(resource.type)
        if table is None:
            raise UnsupportedResourceTypeError(resource.id, resource.type)

        actions: list[str] = []
        for name in operations:
            operation_actions = table.actions_for(Operation.parse(name))
            if operation_actions is None:
                raise UnsupportedOperationError(name, table.kind, resource.id)
            actions.extend(operation_actions)
        return tuple(actions)
