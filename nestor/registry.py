import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from nestor.config import ResourceConfig
from nestor.resources import Resource

logger = logging.getLogger(__name__)


class ResourceRegistry:
    """Read-only lookup of resolved resources by logical id.

    The registry is filled once at construction and never changes afterwards, so
    lookups are safe to share between callers.
    """

    _resources: Mapping[str, Resource]

    def __init__(self, resources: Iterable[Resource] = ()):
        by_id: dict[str, Resource] = {}
        for resource in resources:
            if resource.id in by_id:
                raise ValueError(
                    f"Duplicate resource id detected: '{resource.id}'. "
                    "Resource ids must be unique within a registry."
                )
            by_id[resource.id] = resource
        self._resources = MappingProxyType(by_id)

    @classmethod
    def from_config(cls, resources: Iterable[ResourceConfig]) -> "ResourceRegistry":
        return cls(
            Resource(id=config.id, type=config.type, provider_id=config.arn)
            for config in resources
        )

    def lookup(self, resource_id: str) -> Resource | None:
        resource = self._resources.get(resource_id)
        if resource is None:
            logger.debug("Resource '%s' not found in registry", resource_id)
        return resource

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources.values())
