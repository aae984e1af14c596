"""Permisos de escritura sobre el registro de personas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from clinicbook.app.bootstrap_logging import get_logger
from clinicbook.app.domain.exceptions import AuthorizationError

LOGGER = get_logger(__name__)

OPERACION_EDITAR_PERSONA = "personas.editar"


class Role(str, Enum):
    ADMIN = "ADMIN"
    RECEPCION = "RECEPCION"
    READONLY = "READONLY"


_ROLES_CON_ESCRITURA = frozenset({Role.ADMIN, Role.RECEPCION})


@dataclass(slots=True)
class UserContext:
    role: Role = Role.ADMIN
    username: str = "system"

    @property
    def can_write(self) -> bool:
        return self.role in _ROLES_CON_ESCRITURA

    def require_write(self, operation: str) -> None:
        if self.can_write:
            return
        LOGGER.warning("escritura_denegada operacion=%s rol=%s", operation, self.role.value)
        raise AuthorizationError(f"El perfil {self.role.value} no puede ejecutar '{operation}'.")
