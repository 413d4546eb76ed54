"""Tests for the dependency registry."""

import logging

import pytest

from app.application.services.auth_service import UserAuthServiceImpl
from app.core.container import Capability, Container, build_container
from app.domain.exceptions import BindingNotFoundError
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories.user_auth_repo import (
    UserAuthRepositoryImpl,
)
from app.shared.logging import ContextLogger


def test_resolve_unregistered_raises_binding_not_found() -> None:
    container = Container()
    with pytest.raises(BindingNotFoundError):
        container.resolve(Capability.USER_AUTH_SERVICE)


def test_resolve_is_singleton() -> None:
    container = Container()
    calls: list[int] = []

    def factory(c: Container, log: ContextLogger) -> object:
        calls.append(1)
        return object()

    container.register(Capability.SERVICE_INFO_SERVICE, factory)
    first = container.resolve(Capability.SERVICE_INFO_SERVICE)
    assert container.resolve(Capability.SERVICE_INFO_SERVICE) is first
    assert calls == [1]


def test_logger_is_tagged_with_declared_name() -> None:
    container = Container()
    container.register(
        Capability.SERVICE_INFO_SERVICE,
        lambda c, log: log,
        name="ServiceInfoServiceImpl",
    )
    log = container.resolve(Capability.SERVICE_INFO_SERVICE)
    assert isinstance(log, ContextLogger)
    assert log.class_name == "ServiceInfoServiceImpl"


def test_logger_name_defaults_to_factory_name() -> None:
    container = Container()

    def make_thing(c: Container, log: ContextLogger) -> ContextLogger:
        return log

    container.register(Capability.SERVICE_INFO_SERVICE, make_thing)
    assert container.resolve(Capability.SERVICE_INFO_SERVICE).class_name == "make_thing"


def test_each_binding_gets_its_own_logger() -> None:
    container = Container()
    container.register(Capability.SERVICE_INFO_SERVICE, lambda c, log: log, name="A")
    container.register(Capability.USER_AUTH_SERVICE, lambda c, log: log, name="B")
    a = container.resolve(Capability.SERVICE_INFO_SERVICE)
    b = container.resolve(Capability.USER_AUTH_SERVICE)
    assert a is not b
    assert (a.class_name, b.class_name) == ("A", "B")


def test_transitive_dependencies_resolve() -> None:
    container = Container()
    container.register(Capability.DATABASE, lambda c, log: "db")
    container.register(
        Capability.USER_AUTH_REPOSITORY,
        lambda c, log: ("repo", c.resolve(Capability.DATABASE)),
    )
    assert container.resolve(Capability.USER_AUTH_REPOSITORY) == ("repo", "db")


def test_cycle_is_reported() -> None:
    container = Container()
    container.register(Capability.DATABASE, lambda c, log: c.resolve(Capability.USER_AUTH_REPOSITORY))
    container.register(Capability.USER_AUTH_REPOSITORY, lambda c, log: c.resolve(Capability.DATABASE))
    with pytest.raises(RuntimeError, match="Dependency cycle"):
        container.resolve(Capability.DATABASE)


def test_duplicate_registration_rejected() -> None:
    container = Container()
    container.register(Capability.DATABASE, lambda c, log: 1)
    with pytest.raises(RuntimeError, match="already registered"):
        container.register(Capability.DATABASE, lambda c, log: 2)


def test_frozen_registry_rejects_changes() -> None:
    container = Container()
    container.freeze()
    assert container.frozen
    with pytest.raises(RuntimeError, match="frozen"):
        container.register(Capability.DATABASE, lambda c, log: 1)
    with pytest.raises(RuntimeError, match="frozen"):
        container.override(Capability.DATABASE, object())


def test_override_wins_over_binding() -> None:
    container = Container()
    container.register(Capability.DATABASE, lambda c, log: "real")
    container.override(Capability.DATABASE, "fake")
    assert container.resolve(Capability.DATABASE) == "fake"


def test_construction_emits_debug_line(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="app.core.container"):
        Container()
    assert "Dependency registry created" in caplog.text


def test_build_container_binds_every_capability(settings) -> None:
    container = build_container(settings)
    assert set(container) == set(Capability)
    container.resolve_all()
    assert isinstance(container.resolve(Capability.DATABASE), Database)
    assert isinstance(container.resolve(Capability.USER_AUTH_REPOSITORY), UserAuthRepositoryImpl)
    assert isinstance(container.resolve(Capability.USER_AUTH_SERVICE), UserAuthServiceImpl)


def test_build_container_with_prebuilt_database(settings, fake_db) -> None:
    container = build_container(settings, database=fake_db)
    assert container.resolve(Capability.DATABASE) is fake_db
    assert Capability.DATABASE not in list(container)
