"""Tests for cmdlet class introspection."""

from __future__ import annotations

from helpgen.metadata import (
    Alias,
    Cmdlet,
    Parameter,
    ParameterAttribute,
    SwitchParameter,
    TypeMetadata,
    cmdlet,
    get_cmdlet_attribute,
)


@cmdlet("Get", "Widget")
class GetWidget(Cmdlet):
    name = Parameter(str, ParameterAttribute(mandatory=True, position=0), Alias("n"))
    all = Parameter(SwitchParameter, ParameterAttribute())
    limit = Parameter(int)


@cmdlet("Set", "Widget")
class SetWidget(Cmdlet):
    name = Parameter(str, ParameterAttribute(parameter_set_name="ByName", mandatory=True, position=0))
    id = Parameter(int, ParameterAttribute(parameter_set_name="ById", mandatory=True, position=0))
    value = Parameter(str, ParameterAttribute(mandatory=True))
    trace = Parameter(SwitchParameter, ParameterAttribute(parameter_set_name="ById"), builtin=True)


def test_synthetic_set_excludes_builtin_parameters() -> None:
    metadata = TypeMetadata(GetWidget).load()
    sets = metadata.parameter_sets()

    assert len(sets) == 1
    assert sets[0].synthesized is True
    assert sets[0].name is None
    assert [p.name for p in sets[0].parameters] == ["name", "all", "limit"]
    assert "verbose" in metadata.parameters
    assert metadata.parameters["verbose"].is_builtin is True


def test_named_sets_follow_declaration_order() -> None:
    sets = TypeMetadata(SetWidget).parameter_sets()

    assert [pset.name for pset in sets] == ["ByName", "ById"]
    assert [p.name for p in sets[0].parameters] == ["name", "value"]
    # A builtin parameter that explicitly joins a declared set stays in it.
    assert [p.name for p in sets[1].parameters] == ["id", "value", "trace"]
    assert all(not pset.synthesized for pset in sets)


def test_unattributed_parameter_joins_every_named_set() -> None:
    @cmdlet("Reset", "Widget")
    class ResetWidget(Cmdlet):
        name = Parameter(str, ParameterAttribute(parameter_set_name="ByName", mandatory=True))
        id = Parameter(int, ParameterAttribute(parameter_set_name="ById", mandatory=True))
        force = Parameter(SwitchParameter)

    sets = TypeMetadata(ResetWidget).parameter_sets()

    assert [pset.name for pset in sets] == ["ByName", "ById"]
    assert [p.name for p in sets[0].parameters] == ["name", "force"]
    assert [p.name for p in sets[1].parameters] == ["id", "force"]


def test_subclass_override_replaces_parameter() -> None:
    class Base(Cmdlet):
        name = Parameter(str, ParameterAttribute(mandatory=False))

    class Child(Base):
        name = Parameter(str, ParameterAttribute(mandatory=True), Alias("nm"))

    metadata = TypeMetadata(Child)
    assert metadata.find("NAME") is not None
    assert metadata.find("name").is_mandatory(None) is True
    assert metadata.find("name").aliases == ["nm"]


def test_find_is_case_insensitive() -> None:
    metadata = TypeMetadata(GetWidget)
    assert metadata.find("Name").aliases == ["n"]
    assert metadata.find("missing") is None


def test_cmdlet_attribute_is_not_inherited() -> None:
    class Derived(GetWidget):
        pass

    assert get_cmdlet_attribute(GetWidget).command_name == "Get-Widget"
    assert get_cmdlet_attribute(Derived) is None


def test_parameter_descriptor_binds_values() -> None:
    widget = GetWidget()
    assert widget.name is None
    widget.name = "alpha"
    widget.all = SwitchParameter(True)
    assert widget.name == "alpha"
    assert bool(widget.all) is True
    assert isinstance(GetWidget.name, Parameter)
