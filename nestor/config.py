import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from nestor.exceptions import ConfigError
from nestor.resources import ResourceType

logger = logging.getLogger(__name__)


def _require(data: Mapping[str, Any], key: str, kind: type, where: str) -> Any:  # noqa: ANN401
    if not isinstance(data, Mapping):
        raise ConfigError(f"{where} must be an object, got {type(data).__name__}")
    if key not in data:
        raise ConfigError(f"{where} is missing required key '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise ConfigError(
            f"{where}: '{key}' must be of type {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True, kw_only=True)
class ResourceConfig:
    """A resolved resource as declared in the input document.

    Attributes:
        id: Logical identifier used by permission grants.
        type: Resource type, using the configuration spelling (e.g. ``s3Bucket``).
        arn: Provider-native reference written to policy statements.
    """

    id: str
    type: ResourceType
    arn: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        resource_id = _require(data, "id", str, "resource")
        where = f"resource '{resource_id}'"
        type_name = _require(data, "type", str, where)
        try:
            resource_type = ResourceType(type_name)
        except ValueError:
            valid = ", ".join(t.value for t in ResourceType)
            raise ConfigError(
                f"{where}: unknown resource type '{type_name}'. Valid types: {valid}"
            ) from None
        return cls(id=resource_id, type=resource_type, arn=_require(data, "arn", str, where))


@dataclass(frozen=True, kw_only=True)
class PermissionGrant:
    """Request that a compute unit may perform operations on a logical resource.

    Operations keep their input order and duplicates.
    """

    resource_id: str
    operations: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        resource_id = _require(data, "resourceId", str, "permission")
        where = f"permission on '{resource_id}'"
        actions = _require(data, "actions", list, where)
        operations = tuple(
            _require(action, "operation", str, f"{where}, action {index}")
            for index, action in enumerate(actions)
        )
        return cls(resource_id=resource_id, operations=operations)


@dataclass(frozen=True, kw_only=True)
class PolicyInput:
    resources: Sequence[ResourceConfig] = field(default_factory=tuple)
    permissions: Sequence[PermissionGrant] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        if not isinstance(data, Mapping):
            raise ConfigError(f"policy input must be an object, got {type(data).__name__}")
        resources = data.get("resources", [])
        permissions = data.get("permissions", [])
        if not isinstance(resources, list):
            raise ConfigError("'resources' must be a list")
        if not isinstance(permissions, list):
            raise ConfigError("'permissions' must be a list")
        resource_configs = tuple(ResourceConfig.from_dict(item) for item in resources)
        seen: set[str] = set()
        for resource in resource_configs:
            if resource.id in seen:
                raise ConfigError(f"Duplicate resource id: '{resource.id}'")
            seen.add(resource.id)

        return cls(
            resources=resource_configs,
            permissions=tuple(PermissionGrant.from_dict(item) for item in permissions),
        )


def load_policy_input(path: Path | str) -> PolicyInput:
    """Read a policy input document from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, is not valid UTF-8 JSON or has the wrong shape.
    """
    path = Path(path)
    logger.debug("Loading policy input from %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read policy input {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Invalid encoding in {path}: {e}") from e

    policy_input = PolicyInput.from_dict(data)
    logger.info(
        "Loaded %d resources and %d permissions from %s",
        len(policy_input.resources),
        len(policy_input.permissions),
        path,
    )
    return policy_input
