from registrar.db.session import ConnectionProvider, DatabaseUnavailableError
from registrar.manager import DatabaseManager

__all__ = ["ConnectionProvider", "DatabaseManager", "DatabaseUnavailableError"]
