from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, final

from pulumi_aws.iam import GetPolicyDocumentStatementArgs

ALLOW: Literal["Allow"] = "Allow"


@final
@dataclass(frozen=True)
class PolicyStatement:
    """One Allow statement granting actions on a single resource."""

    resource: str
    actions: Sequence[str] = field(default_factory=tuple)
    effect: Literal["Allow"] = ALLOW

    def to_dict(self) -> dict[str, Any]:
        return {"Effect": self.effect, "Action": list(self.actions), "Resource": self.resource}

    def to_provider_format(self) -> GetPolicyDocumentStatementArgs:
        return GetPolicyDocumentStatementArgs(
            effect=self.effect, actions=list(self.actions), resources=[self.resource]
        )
