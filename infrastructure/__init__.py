from infrastructure.initializer import Initilizer
from infrastructure.databases.postgres import DatabaseBackend, DatabaseConfig, DatabaseConnector, create_database_connector
