# backend/atlas/api/crud.py
"""Route builders shared by the resource routers.

Most catalog resources expose the same five CRUD endpoints and the same
three link endpoints; these helpers register them on a router.
"""

import uuid
from typing import Any, Callable, Optional, Type
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from atlas.api.deps import Paging, get_paging
from atlas.schemas.common import PageResponse, to_page
from atlas.services.base import CrudService


def add_crud_routes(
    router: APIRouter,
    get_service: Callable[..., CrudService],
    request_model: Type[BaseModel],
    response_model: Type[BaseModel],
    update_model: Optional[Type[BaseModel]] = None,
    key_type: Any = uuid.UUID,
) -> None:
    """Register list/create/get/update/delete endpoints on ``router``.

    Args:
        router: Router carrying the resource prefix
        get_service: Dependency returning the resource's CrudService
        request_model: Body of POST (and PUT unless update_model is given)
        response_model: Serialized representation of one entity
        update_model: Optional separate body for PUT
        key_type: Type of the path identifier
    """
    update_model = update_model or request_model
    resource = router.prefix.strip("/").replace("-", "_")

    @router.get("", response_model=PageResponse[response_model], name=f"list_{resource}")
    async def list_entities(
        paging: Paging = Depends(get_paging),
        service: CrudService = Depends(get_service),
    ):
        result = await service.find_all(paging.page, paging.size, paging.search)
        return to_page(result, response_model)

    @router.post(
        "", response_model=response_model, status_code=status.HTTP_201_CREATED, name=f"create_{resource}"
    )
    async def create_entity(data: request_model, service: CrudService = Depends(get_service)):
        return await service.create(data)

    @router.get("/{entity_id}", response_model=response_model, name=f"get_{resource}")
    async def get_entity(entity_id: key_type, service: CrudService = Depends(get_service)):
        return await service.find_by_id(entity_id)

    @router.put("/{entity_id}", response_model=response_model, name=f"update_{resource}")
    async def update_entity(
        entity_id: key_type, data: update_model, service: CrudService = Depends(get_service)
    ):
        return await service.update(entity_id, data)

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT, name=f"delete_{resource}")
    async def delete_entity(entity_id: key_type, service: CrudService = Depends(get_service)):
        await service.delete(entity_id)


def add_link_routes(
    router: APIRouter,
    sub_path: str,
    get_service: Callable[..., Any],
    link_name: str,
    response_model: Type[BaseModel],
    reverse: bool = False,
    owner_type: Any = uuid.UUID,
    target_type: Any = uuid.UUID,
    include_put: bool = True,
) -> None:
    """Register GET/PUT/DELETE endpoints for one many-to-many link.

    The link is the ``link_name`` attribute of the service. With ``reverse``
    the router's own entity sits on the right-hand side of that link.
    """
    name = sub_path.replace("-", "_")
    owner = router.prefix.strip("/").replace("-", "_")

    @router.get(
        f"/{{entity_id}}/{sub_path}",
        response_model=PageResponse[response_model],
        name=f"list_{owner}_{name}",
    )
    async def list_linked(
        entity_id: owner_type,
        paging: Paging = Depends(get_paging),
        service: Any = Depends(get_service),
    ):
        link = getattr(service, link_name)
        find = link.find_left if reverse else link.find_right
        return to_page(await find(entity_id, paging.page, paging.size, paging.search), response_model)

    if include_put:
        @router.put(
            f"/{{entity_id}}/{sub_path}/{{target_id}}",
            status_code=status.HTTP_204_NO_CONTENT,
            name=f"link_{owner}_{name}",
        )
        async def link_entities(entity_id: owner_type, target_id: target_type, service: Any = Depends(get_service)):
            link = getattr(service, link_name)
            if reverse:
                await link.add(target_id, entity_id)
            else:
                await link.add(entity_id, target_id)

    @router.delete(
        f"/{{entity_id}}/{sub_path}/{{target_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"unlink_{owner}_{name}",
    )
    async def unlink_entities(entity_id: owner_type, target_id: target_type, service: Any = Depends(get_service)):
        link = getattr(service, link_name)
        if reverse:
            await link.remove(target_id, entity_id)
        else:
            await link.remove(entity_id, target_id)
