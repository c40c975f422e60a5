class NestorError(Exception):
    """Base class for errors raised by nestor."""


class ConfigError(NestorError):
    """Raised when a policy input document is malformed."""


class PolicySynthesisError(NestorError):
    """Raised when permission grants cannot be turned into policy statements."""


class UnknownResourceError(PolicySynthesisError):
    """Raised when a grant references a resource id missing from the registry."""

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(f"Unknown resourceId:{resource_id}")


class UnsupportedOperationError(PolicySynthesisError):
    """Raised when an operation is not defined for the resource's type."""

    def __init__(self, operation: str, resource_kind: str, resource_id: str):
        self.operation = operation
        self.resource_kind = resource_kind
        self.resource_id = resource_id
        super().__init__(f"Invalid operation on {resource_kind}:{operation}")


class UnsupportedResourceTypeError(PolicySynthesisError):
    """Raised when no policy can be synthesized for the resource's type."""

    def __init__(self, resource_id: str, resource_type: str):
        self.resource_id = resource_id
        self.resource_type = resource_type
        super().__init__(f"no policy can be set on:{resource_id}")
