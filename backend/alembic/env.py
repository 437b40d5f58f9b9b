# alembic/env.py

import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from okefin.core.config import settings
from okefin.database.database import get_base_metadata
import okefin.models

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = get_base_metadata()


def _database_url():
    # settings already applied .env; alembic.ini is only the last resort
    url = os.getenv('DATABASE_URL') and settings.DATABASE_URL
    url = url or config.get_main_option('sqlalchemy.url')
    if not url:
        raise ValueError("DATABASE_URL is not set in environment variables.")
    return url


def _configure_options(url):
    # SQLite cannot ALTER most constraints in place
    return {
        "target_metadata": target_metadata,
        "render_as_batch": url.startswith("sqlite"),
        "compare_type": True,
    }


def run_migrations_offline():
    """Emit SQL for the revisions without a live connection."""
    url = _database_url()
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(url)
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    url = _database_url()
    connectable = engine_from_config(
        {'sqlalchemy.url': url},
        prefix='sqlalchemy.',
        poolclass=pool.NullPool
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options(url))
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
