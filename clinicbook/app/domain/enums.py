# domain/enums.py
from __future__ import annotations
from enum import Enum


class RolPersona(str, Enum):
    PACIENTE = "PACIENTE"
    MEDICO = "MEDICO"


class Genero(str, Enum):
    MASCULINO = "M"
    FEMENINO = "F"


class GrupoSanguineo(str, Enum):
    A_POSITIVO = "A+"
    A_NEGATIVO = "A-"
    B_POSITIVO = "B+"
    B_NEGATIVO = "B-"
    AB_POSITIVO = "AB+"
    AB_NEGATIVO = "AB-"
    O_POSITIVO = "O+"
    O_NEGATIVO = "O-"
