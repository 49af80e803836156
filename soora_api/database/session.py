# soora_api/database/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from soora_api.config.settings import get_settings

settings = get_settings()

DATABASE_URL = settings.database_url

# SQLite connections are shared across the FastAPI threadpool
connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(
    DATABASE_URL,
    echo=settings.db_echo,
    pool_pre_ping=True,
    future=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create every table known to the ORM models."""
    import soora_api.models  # noqa: F401  (registers the mappers on Base)

    Base.metadata.create_all(bind=bind or engine)
