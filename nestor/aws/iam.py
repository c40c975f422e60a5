from collections.abc import Sequence
from typing import Any

from nestor.aws.permission import PolicyStatement

POLICY_VERSION = "2012-10-17"


def policy_document(statements: Sequence[PolicyStatement]) -> dict[str, Any]:
    """Build an IAM policy document from statements, keeping their order."""
    return {
        "Version": POLICY_VERSION,
        "Statement": [statement.to_dict() for statement in statements],
    }
