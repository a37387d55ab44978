from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.controller import register as register_payroll
from .payroll.narrative.openai_narrator import build_narrator

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _prepare_database(settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("[autopay] schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        logger.info("[autopay] demo seed ready")


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        storage_backend = getattr(settings, "STORAGE_BACKEND", "mysql")
        logger.info(
            "[autopay] settings=%s storage=%s db=%s@%s:%s/%s",
            settings_module,
            storage_backend,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if storage_backend == "mysql":
            _prepare_database(settings, db_config)

        container = build_container(
            db_config=db_config,
            storage_backend=storage_backend,
            calculator=StandardPayrollCalculator(
                hours_per_day=getattr(settings, "STANDARD_HOURS_PER_DAY", 8),
                overtime_multiplier=getattr(settings, "OVERTIME_MULTIPLIER", 1.5),
            ),
            narrator=build_narrator(
                api_key=getattr(settings, "OPENAI_API_KEY", ""),
                model=getattr(settings, "OPENAI_MODEL", "gpt-4o-mini"),
                base_url=getattr(settings, "OPENAI_BASE_URL", "") or None,
                timeout=float(getattr(settings, "NARRATIVE_TIMEOUT_SECONDS", 10)),
            ),
        )

    app.extensions["autopay"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    return app
