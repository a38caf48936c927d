from sqlmodel import Session, SQLModel, create_engine

from src.config import DATABASE_URL

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args)


def get_session():
    with Session(engine) as session:
        yield session


def create_db_and_tables():
    # register every table on SQLModel.metadata
    import src.api.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
