"""AWS policy synthesis for nestor."""

from nestor.aws.actions import ACTION_TABLES, ActionTable, Operation
from nestor.aws.iam import policy_document
from nestor.aws.permission import PolicyStatement
from nestor.aws.policy import PolicySynthesizer

__all__ = [
    "ACTION_TABLES",
    "ActionTable",
    "Operation",
    "PolicyStatement",
    "PolicySynthesizer",
    "policy_document",
]
