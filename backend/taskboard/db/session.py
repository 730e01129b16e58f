from sqlmodel import SQLModel, create_engine, Session
from ..core.config import settings

# FastAPI runs sync endpoints in a threadpool; sqlite connections must be shareable
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, connect_args=connect_args)

def init_db(bind=None) -> None:
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
