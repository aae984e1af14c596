"""Utilidades internas de dominio."""

from __future__ import annotations

import re
from typing import Optional

from clinicbook.app.domain.exceptions import ValidationError

_DOCUMENTO_RE = re.compile(r"^[A-Za-z]\d{7}[A-Za-z]$")
_MIN_DIGITOS_TELEFONO = 3


def _require_non_empty(value: Optional[str], field_name: str) -> str:
    """Exige string no vacío; lanza ValidationError si no cumple."""
    v = (value or "").strip()
    if not v:
        raise ValidationError(f"Campo obligatorio: {field_name}.")
    return v


def _validate_email_basic(email: str) -> str:
    """Validación básica de email (no pretende ser RFC completa)."""
    e = _require_non_empty(email, "email")
    if "@" not in e or "." not in e.split("@")[-1]:
        raise ValidationError("Email no parece válido.")
    return e


def _validate_phone_basic(phone: str, field_name: str = "telefono") -> str:
    """Teléfono obligatorio, solo dígitos y con un mínimo de longitud."""
    t = _require_non_empty(phone, field_name)
    if not t.isdigit():
        raise ValidationError(f"{field_name} debe ser numérico.")
    if len(t) < _MIN_DIGITOS_TELEFONO:
        raise ValidationError(f"{field_name} debe tener al menos {_MIN_DIGITOS_TELEFONO} dígitos.")
    return t


def _validate_documento(documento: str) -> str:
    """Documento nacional: letra + 7 dígitos + letra (ej: S1234567A)."""
    d = _require_non_empty(documento, "documento")
    if not _DOCUMENTO_RE.match(d):
        raise ValidationError("Documento inválido: se espera letra, 7 dígitos y letra.")
    return d.upper()


def _validate_nombre_etiqueta(nombre: str) -> str:
    n = _require_non_empty(nombre, "etiqueta")
    if not n.isalnum():
        raise ValidationError("Las etiquetas solo admiten caracteres alfanuméricos.")
    return n
