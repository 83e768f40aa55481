from atlas.models.tosca import ToscaApplication
from atlas.repositories.publication_repository import ToscaApplicationRepository
from atlas.services.base import CrudService


class ToscaApplicationService(CrudService[ToscaApplication]):
    """Registered TOSCA applications (metadata only)."""

    repository_class = ToscaApplicationRepository
