# bootstrap.py
"""
Bootstrap de la aplicación ClinicBook.

Responsabilidades:
- Leer la configuración del entorno
- Configurar logging y el hook global de excepciones
- Devolver el contenedor listo para usar

Este archivo es infraestructura pura.
No contiene lógica de dominio ni de aplicación.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from os import getenv
from pathlib import Path
from typing import Iterable, Optional

from clinicbook.app.application.security import Role, UserContext
from clinicbook.app.bootstrap_logging import configure_logging, get_logger, set_run_context
from clinicbook.app.container import AppContainer, build_container
from clinicbook.app.crash_handler import install_global_exception_hook
from clinicbook.app.domain.personas import Persona
from clinicbook.app.infrastructure.memoria.repos_personas import PersonasRepositoryMemoria


LOGGER = get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return getenv(name, default).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True, slots=True)
class AppSettings:
    log_dir: Path
    log_level: str = "INFO"
    log_json: bool = True
    readonly: bool = False
    username: str = "system"


def load_settings() -> AppSettings:
    """Resuelve la configuración desde variables de entorno con valores por defecto."""
    return AppSettings(
        log_dir=Path(getenv("CLINICBOOK_LOG_DIR", "./logs")).expanduser(),
        log_level=getenv("CLINICBOOK_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_json=_env_flag("CLINICBOOK_LOG_JSON", "1"),
        readonly=_env_flag("CLINICBOOK_READONLY", "0"),
        username=getenv("CLINICBOOK_USER", "system").strip() or "system",
    )


def bootstrap_app(
    settings: Optional[AppSettings] = None,
    personas: Optional[Iterable[Persona]] = None,
) -> AppContainer:
    settings = settings or load_settings()
    configure_logging("clinicbook", settings.log_dir, level=settings.log_level, json=settings.log_json)
    set_run_context(uuid.uuid4().hex[:8], user=settings.username)
    install_global_exception_hook(LOGGER)

    user_context = UserContext(
        role=Role.READONLY if settings.readonly else Role.ADMIN,
        username=settings.username,
    )
    container = build_container(PersonasRepositoryMemoria(personas), user_context)
    LOGGER.info("app_bootstrapped role=%s", user_context.role.value)
    return container
