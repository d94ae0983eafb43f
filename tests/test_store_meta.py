# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from schedview_lib.core.config import CFG
from schedview_lib.core.error import SVError
from schedview_lib.properties.execution import Execution
from schedview_lib.properties.job import Job
from schedview_lib.store import FileBackend
from schedview_lib.store.interface import StoreInterface
from schedview_lib.store.meta import BackendMeta, backend


@pytest.fixture
def registry(monkeypatch):
    """Provide an isolated copy of the backend registry."""
    monkeypatch.setattr(BackendMeta, "_registry", dict(BackendMeta._registry))
    return BackendMeta._registry


def test_backend_decorator_registers_class(registry):
    @backend
    class MemoryStore(StoreInterface, metaclass=BackendMeta):
        @staticmethod
        def envName() -> str:
            return "memory"

        def listJobs(self) -> list[Job]:
            return []

        def getLastExecutionGroup(self, job_name: str) -> list[Execution]:
            return []

        def listExecutions(self, job_name: str) -> list[Execution]:
            return []

    assert registry["memory"] is MemoryStore
    assert BackendMeta.fromStr("memory") is MemoryStore
    assert str(MemoryStore) == "memory"


def test_from_str_unknown_raises():
    with pytest.raises(SVError, match="No store backend registered as 'etcd'"):
        BackendMeta.fromStr("etcd")


def test_from_env_var_or_default_uses_env_var(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.backend, "file")
    monkeypatch.setattr(CFG.store, "backend", "etcd")

    assert BackendMeta.fromEnvVarOrDefault() is FileBackend


def test_from_env_var_or_default_uses_config(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.backend, raising=False)
    monkeypatch.setattr(CFG.store, "backend", "file")

    assert BackendMeta.fromEnvVarOrDefault() is FileBackend


def test_from_env_var_unknown_backend_raises(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.backend, "consul")

    with pytest.raises(SVError):
        BackendMeta.fromEnvVarOrDefault()


def test_obtain_prefers_explicit_name(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.backend, "consul")

    assert BackendMeta.obtain("file") is FileBackend


def test_obtain_without_name_falls_back(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.backend, raising=False)
    monkeypatch.setattr(CFG.store, "backend", "file")

    assert BackendMeta.obtain(None) is FileBackend
