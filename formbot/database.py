from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from formbot.logger import logger

Base = declarative_base()

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:", "sqlite+pysqlite://", "sqlite+pysqlite:///:memory:")


class Database:
    """Engine and session factory owned by one application instance.

    Built once in ``create_app``, tables are created when the app starts and
    the connection pool is released when it shuts down.
    """

    def __init__(self, url: str):
        self.url = url
        engine_kwargs = {"pool_pre_ping": True}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url in IN_MEMORY_SQLITE_URLS:
                # every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, **engine_kwargs)
        self.sessionlocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        from formbot.models import folder, form, global_form, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database ready: {self.engine.url.render_as_string(hide_password=True)}")

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")
