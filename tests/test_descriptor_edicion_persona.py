from __future__ import annotations

import pytest

from clinicbook.app.application.edicion_personas.descriptor import DescriptorEdicionPersona
from clinicbook.app.domain.enums import GrupoSanguineo
from clinicbook.app.domain.exceptions import ValidationError
from clinicbook.app.domain.personas import Etiqueta


def test_descriptor_vacio_no_edita_nada() -> None:
    descriptor = DescriptorEdicionPersona()

    assert descriptor.hay_campos_editados() is False
    assert descriptor.campos_editados() == ()


@pytest.mark.parametrize(
    "campo, valor",
    [
        ("nombre", "Bob"),
        ("telefono", "98765432"),
        ("contacto_emergencia", "90000000"),
        ("email", "bob@example.com"),
        ("direccion", "Calle 2"),
        ("observacion", ""),
        ("documento", "S2222222B"),
        ("condicion", "gripe"),
        ("grupo_sanguineo", GrupoSanguineo.A_POSITIVO),
    ],
)
def test_cualquier_campo_presente_cuenta_como_edicion(campo, valor) -> None:
    descriptor = DescriptorEdicionPersona(**{campo: valor})

    assert descriptor.hay_campos_editados() is True
    assert descriptor.campos_editados() == (campo,)


def test_set_de_etiquetas_vacio_cuenta_como_edicion() -> None:
    assert DescriptorEdicionPersona(etiquetas=frozenset()).hay_campos_editados() is True


def test_etiquetas_se_copian_y_no_se_pueden_mutar() -> None:
    originales = {Etiqueta("vip")}
    descriptor = DescriptorEdicionPersona(etiquetas=originales)

    originales.add(Etiqueta("nueva"))

    assert descriptor.etiquetas == frozenset({Etiqueta("vip")})
    with pytest.raises(AttributeError):
        descriptor.etiquetas.add(Etiqueta("otra"))  # type: ignore[union-attr]


def test_etiquetas_admiten_textos() -> None:
    descriptor = DescriptorEdicionPersona(etiquetas={"vip", "urgente"})

    assert descriptor.etiquetas == frozenset({Etiqueta("vip"), Etiqueta("urgente")})


def test_etiquetas_como_texto_suelto_se_rechazan() -> None:
    with pytest.raises(ValidationError, match="colección"):
        DescriptorEdicionPersona(etiquetas="vip")  # type: ignore[arg-type]


def test_campos_solo_paciente_detecta_condicion_y_grupo() -> None:
    assert DescriptorEdicionPersona(nombre="Bob").campos_solo_paciente() == ()
    assert DescriptorEdicionPersona(condicion="flu").campos_solo_paciente() == ("condicion",)
    assert DescriptorEdicionPersona(
        condicion="flu", grupo_sanguineo=GrupoSanguineo.B_NEGATIVO
    ).campos_solo_paciente() == ("condicion", "grupo_sanguineo")


def test_copia_es_igual_pero_independiente() -> None:
    descriptor = DescriptorEdicionPersona(nombre="Bob", etiquetas={Etiqueta("vip")})

    copia = descriptor.copia()

    assert copia == descriptor
    assert copia is not descriptor


def test_igualdad_y_repr_derivan_de_todos_los_campos() -> None:
    a = DescriptorEdicionPersona(nombre="Bob", etiquetas=[Etiqueta("x"), Etiqueta("y")])
    b = DescriptorEdicionPersona(nombre="Bob", etiquetas=[Etiqueta("y"), Etiqueta("x")])

    assert a == b
    assert a != DescriptorEdicionPersona(nombre="Bob")
    assert "nombre='Bob'" in repr(a)
    assert "grupo_sanguineo=None" in repr(a)
