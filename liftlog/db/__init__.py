"""Database package: engine, session, base."""

from liftlog.db.session import get_db, get_engine, get_session_maker

__all__ = ["get_db", "get_engine", "get_session_maker"]
