"""Repositories for software platforms and cloud services."""

from atlas.models.platform import CloudService, SoftwarePlatform
from atlas.repositories.base import CrudRepository


class SoftwarePlatformRepository(CrudRepository[SoftwarePlatform]):
    model = SoftwarePlatform
    entity_name = "SoftwarePlatform"
    search_fields = ("name",)


class CloudServiceRepository(CrudRepository[CloudService]):
    model = CloudService
    entity_name = "CloudService"
    search_fields = ("name", "provider")
