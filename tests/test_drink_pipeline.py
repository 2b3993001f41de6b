"""
Tests for the serving services and the machine catalog.
"""

import logging

import pytest
from pydantic import ValidationError

from adapters.machines import CoffeeMachine, TeaMachine
from core.domain.models import MachineInfo, MachineKind
from core.services.drink_pipeline import (
    MACHINE_REGISTRY,
    build_machine,
    describe_machines,
    run_demo,
    serve,
    serve_all,
)


class TestBuildMachine:

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [(MachineKind.COFFEE, CoffeeMachine), (MachineKind.TEA, TeaMachine)],
    )
    def test_builds_registered_variant(self, kind, expected, console):
        machine = build_machine(kind, console)
        assert isinstance(machine, expected)
        assert machine.console is console

    def test_every_kind_is_registered(self):
        assert set(MACHINE_REGISTRY) == set(MachineKind)


class TestServe:

    def test_serve_coffee(self, console, buffer):
        serve(build_machine(MachineKind.COFFEE, console))
        assert buffer.getvalue() == "prepared.\nmilk added.\n"

    def test_serve_tea(self, console, buffer):
        serve(build_machine(MachineKind.TEA, console))
        assert buffer.getvalue() == "prepared.\n"

    def test_serve_all_keeps_order(self, console, buffer):
        serve_all([TeaMachine(console), CoffeeMachine(console)])
        assert buffer.getvalue().splitlines() == ["prepared.", "prepared.", "milk added."]

    def test_serve_logs_machine_name(self, console, caplog):
        with caplog.at_level(logging.DEBUG, logger="core.services.drink_pipeline"):
            serve(CoffeeMachine(console))
        assert "CoffeeMachine" in caplog.text


class TestRunDemo:

    def test_coffee_then_tea(self, console, buffer):
        run_demo(console)
        assert buffer.getvalue().splitlines() == ["prepared.", "milk added.", "prepared."]


class TestDescribeMachines:

    def test_order_and_milk_flags(self):
        infos = describe_machines()
        assert [info.kind for info in infos] == [MachineKind.COFFEE, MachineKind.TEA]
        assert [info.adds_milk for info in infos] == [True, False]
        assert [info.name for info in infos] == ["CoffeeMachine", "TeaMachine"]

    def test_info_serializes(self):
        payload = describe_machines()[0].model_dump(mode="json")
        assert payload["kind"] == "coffee"
        assert payload["adds_milk"] is True

    def test_info_is_frozen(self):
        info = MachineInfo(kind=MachineKind.TEA, name="TeaMachine")
        with pytest.raises(ValidationError):
            info.name = "Other"

    def test_adds_milk_follows_machine_behavior(self, monkeypatch):
        monkeypatch.setitem(MACHINE_REGISTRY, MachineKind.TEA, CoffeeMachine)
        infos = describe_machines()
        assert [info.adds_milk for info in infos] == [True, True]
