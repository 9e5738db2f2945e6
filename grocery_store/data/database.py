# grocery_store/data/database.py
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy import DateTime, create_engine
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from grocery_store.utils.settings import DATABASE_URL, SQL_ECHO

#sqlite w dev/testach wymaga wylaczenia check_same_thread (TestClient uzywa innego watku)
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """
    Daty zawsze w UTC. sqlite nie przechowuje strefy, wiec przy zapisie
    sprowadzamy do UTC, a przy odczycie doklejamy timezone.utc.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Jedna grupa zapisow = jedna transakcja.
    commit po sukcesie, rollback + ponowne rzucenie wyjatku przy bledzie.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
