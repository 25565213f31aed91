"""
Migration environment for the scheduling schema.

The database URL always comes from :mod:`cadence.core.config`, never
from ``alembic.ini``, so migrations hit the same database as the API.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel

from cadence.core.config import settings
import cadence.db.base  # noqa: F401  (registers every table on SQLModel.metadata)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

target_metadata = SQLModel.metadata


def _configure_options() -> dict:
    # Status enum and JSON training days must be diffed by type too
    options = {"target_metadata": target_metadata, "compare_type": True}
    if settings.DATABASE_URL.startswith("sqlite"):
        options["render_as_batch"] = True
    return options


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout instead of executing it."""
    context.configure(url=settings.DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"},
                      **_configure_options())

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(config.get_section(config.config_ini_section, {}), prefix="sqlalchemy.",
                                     poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options())

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
