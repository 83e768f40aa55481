"""Publications referenced by algorithms and implementations."""

from atlas.models.associations import algorithm_publications, implementation_publications
from atlas.models.publication import Publication
from atlas.repositories.base import AssociationRepository
from atlas.repositories.publication_repository import PublicationRepository
from atlas.services.base import CrudService


class PublicationService(CrudService[Publication]):
    repository_class = PublicationRepository

    async def _before_delete(self, entity: Publication) -> None:
        for table, column in (
            (algorithm_publications, "algorithm_id"),
            (implementation_publications, "implementation_id"),
        ):
            await AssociationRepository(self.session, table, column, "publication_id").unlink_all_right(entity.id)
