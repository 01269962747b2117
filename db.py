from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from sqlalchemy import event, Engine, text, create_engine, Result
from sqlalchemy.orm import sessionmaker, Session

import config
from models.base import Base

"""
Imports of these models are needed to correctly create tables in the database.
For more information see https://stackoverflow.com/questions/7478403/sqlalchemy-classes-across-files
"""
from models.product import Product
from models.product_attribute import ProductAttributeMapping, ProductAttributeValue
from models.checkout_attribute import CheckoutAttribute, CheckoutAttributeValue
from models.download import Download

# HARD DISABLE SQL echo, attribute formatting runs on every cart render
sql_echo = False

url = f"sqlite:///data/{config.DB_NAME}"
engine = create_engine(url, echo=sql_echo)
session_maker = sessionmaker(engine, expire_on_commit=False)


@contextmanager
def get_db_session() -> Iterator[Session]:
    session = None
    try:
        with session_maker() as sync_session:
            session = sync_session
            yield session
    finally:
        if session is not None:
            session.close()


def session_execute(stmt, session: Session) -> Result[Any]:
    return session.execute(stmt)


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def check_all_tables_exist(session: Session) -> bool:
    for table in Base.metadata.tables.values():
        sql_query = f"SELECT name FROM sqlite_master WHERE type='table' AND name='{table.name}';"
        result = session.execute(text(sql_query))
        if result.scalar() is None:
            return False
    return True


def create_db_and_tables():
    data_folder = Path("data")
    if data_folder.exists() is False:
        data_folder.mkdir()

    with get_db_session() as session:
        if not check_all_tables_exist(session):
            Base.metadata.create_all(bind=engine)
