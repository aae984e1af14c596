from __future__ import annotations

from pathlib import Path

import pytest

from clinicbook.app.application.edicion_personas import DescriptorEdicionPersona
from clinicbook.app.application.security import Role
from clinicbook.app.bootstrap import AppSettings, bootstrap_app, load_settings
from clinicbook.app.container import build_container
from clinicbook.app.domain.exceptions import AuthorizationError


def test_load_settings_usa_valores_por_defecto(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CLINICBOOK_LOG_DIR", "CLINICBOOK_LOG_LEVEL", "CLINICBOOK_LOG_JSON", "CLINICBOOK_READONLY", "CLINICBOOK_USER"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings == AppSettings(log_dir=Path("./logs"))


def test_load_settings_lee_el_entorno(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CLINICBOOK_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("CLINICBOOK_LOG_LEVEL", "debug")
    monkeypatch.setenv("CLINICBOOK_LOG_JSON", "0")
    monkeypatch.setenv("CLINICBOOK_READONLY", "yes")
    monkeypatch.setenv("CLINICBOOK_USER", "recepcion")

    settings = load_settings()

    assert settings.log_dir == tmp_path
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.readonly is True
    assert settings.username == "recepcion"


def test_bootstrap_app_devuelve_contenedor_operativo(tmp_path: Path, paciente_alex) -> None:
    container = bootstrap_app(AppSettings(log_dir=tmp_path, log_json=False), personas=[paciente_alex])

    result = container.editar_persona().execute("S1111111A", DescriptorEdicionPersona(nombre="Alexandra"))

    assert result.persona.nombre == "Alexandra"
    assert container.personas_repo.listar_pacientes() == (result.persona,)
    assert (tmp_path / "app.log").exists()


def test_bootstrap_app_en_modo_readonly_impide_editar(tmp_path: Path, paciente_alex) -> None:
    container = bootstrap_app(AppSettings(log_dir=tmp_path, readonly=True), personas=[paciente_alex])

    assert container.user_context.role is Role.READONLY
    with pytest.raises(AuthorizationError):
        container.editar_persona().execute("S1111111A", DescriptorEdicionPersona(nombre="Alexandra"))


def test_container_comparte_repositorio_entre_casos_de_uso(container) -> None:
    primero = container.editar_persona()
    segundo = container.editar_persona()

    primero.execute("T2222222B", DescriptorEdicionPersona(direccion="Plaza Norte 2"))

    assert primero is not segundo
    assert segundo.repo is container.personas_repo
    assert container.personas_repo.listar_medicos()[0].direccion == "Plaza Norte 2"


def test_build_container_sin_argumentos_crea_repositorio_vacio() -> None:
    container = build_container()

    assert container.personas_repo.listar_todos() == ()
    assert container.user_context.can_write is True
