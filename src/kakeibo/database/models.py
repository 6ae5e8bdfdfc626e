"""SQLAlchemy models for the kakeibo database."""

from datetime import UTC

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Engine,
    DateTime,
    TypeDecorator,
    create_engine,
    func,
)
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp that always reads back in UTC.

    SQLite stores ``CURRENT_TIMESTAMP`` as naive UTC text; those values are
    tagged with UTC so every backend returns aware datetimes.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    kind = Column("type", String(16), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    amount = Column(Integer, nullable=False)
    memo = Column(String, nullable=False, default="")
    created_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine for a database URL.

    In-memory SQLite databases get a single shared connection so every
    session sees the same data.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine, expire_on_commit=False)
