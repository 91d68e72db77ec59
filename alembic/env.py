"""
Alembic environment for the users/activities schema.

The URL always comes from DATABASE_URL (letshang.core.config.settings), so
migrations target the same database as the running API. SQLite has no real
ALTER TABLE, so migrations run in batch mode there.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import make_url

from letshang.core.config import settings
from letshang.models import Base  # registers every model on Base.metadata

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _configure_options() -> dict:
    backend = make_url(settings.DATABASE_URL).get_backend_name()
    return {
        "target_metadata": Base.metadata,
        "compare_type": True,
        "render_as_batch": backend == "sqlite",
    }


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    context.configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(settings.DATABASE_URL, poolclass=pool.NullPool)

    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **_configure_options())

            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
