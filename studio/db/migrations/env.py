import logging
from logging.config import fileConfig

from alembic import context

from studio.app.config import get_settings
from studio.db.base import Base, build_engine

# import model modules so Base.metadata is fully populated
import studio.models  # noqa: F401

# Alembic config
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

settings = get_settings()
db_url = config.get_main_option("sqlalchemy.url") or settings.SQLALCHEMY_DATABASE_URL
logging.getLogger("alembic").info("Running migrations against %s", db_url.split("@")[-1])

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=db_url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = build_engine(db_url)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
