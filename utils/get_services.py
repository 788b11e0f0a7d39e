from fastapi import Depends, Request
from interfaces.link_store_interface import ILinkStore
from services.link.link_service import LinkService
from utils.get_connections import get_link_store

def get_link_service(
    request: Request,
    link_store: ILinkStore = Depends(get_link_store)
) -> LinkService:
    return LinkService(
        link_store=link_store,
        base_url=request.app.state.settings.public_base_url
    )
