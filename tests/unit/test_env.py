"""Tests for project environment helpers."""

import logging
from pathlib import Path

import pytest

from crdgen.errors import DiscoveryError, ProjectRootError
from crdgen.lib import env
from crdgen.lib.env import (
    ProjectRoot,
    check_project_root,
    get_module_root,
    get_project_root,
    is_operator_go,
)
from crdgen.lib.logging import configure_logging
from crdgen.settings import Settings


def test_get_project_root_override(tmp_path: Path) -> None:
    assert get_project_root(tmp_path).path == tmp_path.resolve()


def test_get_project_root_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRDGEN_PROJECT_ROOT", str(tmp_path))

    assert get_project_root() == ProjectRoot(tmp_path)


def test_get_project_root_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert get_project_root().path == tmp_path.resolve()


def test_check_project_root(fake_project, tmp_path: Path) -> None:
    check_project_root(fake_project)

    with pytest.raises(ProjectRootError, match="build/Dockerfile"):
        check_project_root(ProjectRoot(tmp_path))


def test_get_module_root(fake_project) -> None:
    assert get_module_root(fake_project) == "github.com/example/app-operator"


def test_get_module_root_without_directive(fake_project) -> None:
    fake_project.join("go.mod").write_text("go 1.13\n")

    with pytest.raises(DiscoveryError, match="no module directive"):
        get_module_root(fake_project)


def test_is_operator_go(fake_project) -> None:
    assert not is_operator_go(fake_project)

    main_go = fake_project.join("cmd", "manager", "main.go")
    main_go.parent.mkdir(parents=True)
    main_go.write_text("package main\n")

    assert is_operator_go(fake_project)


def test_configure_logging_level() -> None:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)


def test_get_project_root_from_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(env, "get_settings", lambda: Settings(project_root=tmp_path))

    assert get_project_root() == ProjectRoot(tmp_path)


def test_get_module_root_not_utf8(fake_project) -> None:
    fake_project.join("go.mod").write_bytes(b"module github.com/\xff\xfe/op\n")

    with pytest.raises(DiscoveryError, match="not valid UTF-8"):
        get_module_root(fake_project)
