# src/inkpost/scripts/migrate.py
"""Apply Alembic migrations up to head."""
from __future__ import annotations

import os

from alembic import command
from alembic.config import Config

from inkpost.core.settings import settings

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))


def run_upgrade_head() -> None:
    """Upgrade the configured database to the latest revision."""
    cfg = Config(os.path.join(PROJECT_ROOT, "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", settings.effective_database_url)
    cfg.set_main_option("script_location", os.path.join(PROJECT_ROOT, "migrations"))
    command.upgrade(cfg, "head")


if __name__ == "__main__":
    run_upgrade_head()
