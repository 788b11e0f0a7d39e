from infrastructure.databases.postgres import DatabaseConnector, create_database_connector


__all__ = [
    'Initilizer'
]

class Initilizer:
    @staticmethod
    def create_database_connector() -> DatabaseConnector:
        return create_database_connector()
