"""Repositories for publications and TOSCA applications."""

from atlas.models.publication import Publication
from atlas.models.tosca import ToscaApplication
from atlas.repositories.base import CrudRepository


class PublicationRepository(CrudRepository[Publication]):
    model = Publication
    entity_name = "Publication"
    search_fields = ("title", "doi")


class ToscaApplicationRepository(CrudRepository[ToscaApplication]):
    model = ToscaApplication
    entity_name = "ToscaApplication"
    search_fields = ("name", "tosca_name")
