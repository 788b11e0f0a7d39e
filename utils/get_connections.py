from fastapi import Request
from infrastructure.databases.postgres import DatabaseConnector
from interfaces.link_store_interface import ILinkStore

def get_db_connector(request: Request) -> DatabaseConnector:
    return request.app.state.db_connection

def get_link_store(request: Request) -> ILinkStore:
    return request.app.state.link_store
