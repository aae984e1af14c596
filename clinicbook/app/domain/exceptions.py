# domain/exceptions.py
"""
Excepciones del dominio.

Propósito:
- Distinguir errores de reglas de negocio (dominio) de errores técnicos.
- Permitir que la capa de aplicación/UI traduzca errores a mensajes para el usuario.
- Cada error de edición expone un `codigo` estable para que la presentación
  no dependa del texto del mensaje.
"""

from __future__ import annotations

from typing import Tuple


class DomainError(Exception):
    """Error base del dominio."""

    codigo = "DOMAIN_ERROR"


class ValidationError(DomainError):
    """Entidad en estado inválido o violación de invariantes."""

    codigo = "VALIDATION_ERROR"


class BusinessRuleError(DomainError):
    """Violación de regla de negocio (p. ej., documento duplicado al editar)."""

    codigo = "BUSINESS_RULE_ERROR"


class AuthorizationError(DomainError):
    """Operación denegada por falta de permisos del usuario actual."""

    codigo = "AUTHORIZATION_ERROR"


# ---------------------------------------------------------------------
# Edición de personas
# ---------------------------------------------------------------------


class NoFieldsSpecifiedError(ValidationError):
    """El descriptor de edición no trae ningún campo."""

    codigo = "NO_FIELDS_SPECIFIED"

    def __init__(self) -> None:
        super().__init__("At least one field to edit must be provided.")


class RecordNotFoundError(DomainError):
    """No existe ninguna persona con el documento indicado."""

    codigo = "RECORD_NOT_FOUND"

    def __init__(self, message: str = "This person hasn't been saved") -> None:
        super().__init__(message)


class InapplicableFieldForRoleError(BusinessRuleError):
    """Se intentó asignar a un médico un campo que solo tiene sentido en pacientes."""

    codigo = "INAPPLICABLE_FIELD_FOR_ROLE"

    def __init__(self, campos: Tuple[str, ...]) -> None:
        super().__init__("Doctors cannot have Condition or BloodType fields.")
        self.campos = campos


class DuplicateRecordError(BusinessRuleError):
    """La identidad resultante coincide con la de otra persona ya guardada."""

    codigo = "DUPLICATE_RECORD"

    def __init__(self, message: str = "This person already exists in the address book.") -> None:
        super().__init__(message)


class InternalConsistencyError(RuntimeError):
    """
    El repositorio contiene más de una persona con el mismo documento.

    No hereda de DomainError: no es un error de usuario sino datos corruptos,
    y no debe presentarse como un aviso recuperable.
    """

    codigo = "INTERNAL_CONSISTENCY_FAULT"
