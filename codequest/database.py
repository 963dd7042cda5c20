from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from codequest.config import get_settings

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    # SQLite needs check_same_thread=False for FastAPI
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(
        database_url,
        connect_args=connect_args,
        echo=False,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


settings = get_settings()

engine = build_engine(settings.database_url) if settings.database_url else None
