"""Schema migration and first-run seeding."""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig

import app.database.db as db_module
from app.core.config import get_config
from app.core.enums import UserRole
from app.core.startup import bootstrap
from app.models import Base, User
from app.services.user_service import UserService

PROJECT_ROOT = Path(__file__).resolve().parents[2]

logger = logging.getLogger(__name__)


def _build_alembic_config(database_url: str) -> AlembicConfig:
    cfg = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


def seed_default_admin(session) -> User | None:
    """Create the configured administrator when the users table is empty."""
    cfg = get_config()
    service = UserService(session)
    if service.count() > 0:
        return None
    user = service.create_user(
        username=cfg.DEFAULT_ADMIN_USERNAME,
        password=cfg.DEFAULT_ADMIN_PASSWORD,
        email=f"{cfg.DEFAULT_ADMIN_USERNAME}@everflown.local",
        role=UserRole.ADMIN.value,
    )
    logger.info(
        "database.admin.seeded",
        extra={"event": "database.admin.seeded", "username": user.username},
    )
    return user


def init_db(run_migrations: bool = True) -> None:
    bootstrap()
    active_url = db_module.get_active_database_url()
    if run_migrations:
        command.upgrade(_build_alembic_config(active_url), "head")
    else:
        Base.metadata.create_all(bind=db_module.get_engine())
    logger.info(
        "database.tables.created",
        extra={
            "event": "database.tables.created",
            "database_url": active_url,
            "migrated": run_migrations,
        },
    )

    with db_module.get_db_session() as session:
        seed_default_admin(session)


if __name__ == "__main__":
    init_db()
