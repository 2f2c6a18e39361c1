from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from app.core.config import settings
from app.db.base import Base
from app.db.models.person_model import Person  # noqa: F401  registers the people table

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def people_database_url() -> str:
    """Sync URL for the people database.

    ``alembic -x db_url=...`` wins over the app settings, so a migration can be
    pointed at a scratch database without touching ``.env``.
    """
    override = context.get_x_argument(as_dictionary=True).get("db_url")
    if override:
        return override
    return settings.sync_database_url


def configure_people_context(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        **kwargs,
    )


def run_migrations_offline():
    configure_people_context(
        url=people_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    engine = create_engine(people_database_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        configure_people_context(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
