from .async_db import create_db_and_tables, create_engine, create_session_factory

__all__ = ["create_db_and_tables", "create_engine", "create_session_factory"]
