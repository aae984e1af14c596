from __future__ import annotations

import difflib
import pprint
from typing import Any, Callable

import pytest

from clinicbook.app.application.security import UserContext
from clinicbook.app.container import AppContainer, build_container
from clinicbook.app.domain.enums import Genero, GrupoSanguineo
from clinicbook.app.domain.personas import Etiqueta, Medico, Paciente
from clinicbook.app.infrastructure.memoria.repos_personas import PersonasRepositoryMemoria


def _datos_paciente(**overrides: Any) -> dict[str, Any]:
    datos: dict[str, Any] = {
        "nombre": "Alex",
        "telefono": "91110000",
        "email": "alex@example.com",
        "direccion": "Calle Mayor 1",
        "observacion": "",
        "genero": Genero.MASCULINO,
        "documento": "S1111111A",
        "etiquetas": frozenset({Etiqueta("cronico")}),
        "contacto_emergencia": "93330000",
        "condicion": "asma",
        "grupo_sanguineo": GrupoSanguineo.O_POSITIVO,
    }
    datos.update(overrides)
    return datos


def _datos_medico(**overrides: Any) -> dict[str, Any]:
    datos: dict[str, Any] = {
        "nombre": "Laura Gil",
        "telefono": "92220000",
        "email": "laura@example.com",
        "direccion": "Avenida Sur 5",
        "observacion": "Turno de mañana",
        "genero": Genero.FEMENINO,
        "documento": "T2222222B",
        "etiquetas": frozenset({Etiqueta("cardiologia")}),
    }
    datos.update(overrides)
    return datos


@pytest.fixture()
def crear_paciente() -> Callable[..., Paciente]:
    def _crear(**overrides: Any) -> Paciente:
        return Paciente(**_datos_paciente(**overrides))

    return _crear


@pytest.fixture()
def crear_medico() -> Callable[..., Medico]:
    def _crear(**overrides: Any) -> Medico:
        return Medico(**_datos_medico(**overrides))

    return _crear


@pytest.fixture()
def paciente_alex(crear_paciente: Callable[..., Paciente]) -> Paciente:
    return crear_paciente()


@pytest.fixture()
def medico_laura(crear_medico: Callable[..., Medico]) -> Medico:
    return crear_medico()


@pytest.fixture()
def repo(paciente_alex: Paciente, medico_laura: Medico) -> PersonasRepositoryMemoria:
    return PersonasRepositoryMemoria([paciente_alex, medico_laura])


@pytest.fixture()
def container(repo: PersonasRepositoryMemoria) -> AppContainer:
    return build_container(repo, UserContext())


@pytest.fixture()
def assert_expected_actual():
    def _assert(expected: Any, actual: Any, *, message: str) -> None:
        expected_str = pprint.pformat(expected, width=120)
        actual_str = pprint.pformat(actual, width=120)
        diff = "\n".join(
            difflib.unified_diff(
                expected_str.splitlines(),
                actual_str.splitlines(),
                fromfile="expected",
                tofile="actual",
                lineterm="",
            )
        )
        assert expected == actual, (
            f"{message}\nExpected:\n{expected_str}\nActual:\n{actual_str}\nDiff:\n{diff}"
        )

    return _assert
