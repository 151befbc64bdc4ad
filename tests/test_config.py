"""Tests for docresolver.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from docresolver.config import (
    JAVA_VERSION_ENV,
    ConfigError,
    ResolverConfig,
    load_config,
)


@pytest.fixture(autouse=True)
def _clear_java_version_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(JAVA_VERSION_ENV, raising=False)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ResolverConfig)
    assert config.root == tmp_path.resolve()
    assert config.doc_jars == []
    assert config.prefix == "docs"
    assert config.java_version is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".docresolver.yml"
    config_file.write_text(
        """
prefix: "api/docs/"
java_version: "1.8.0_92"
doc_jars:
  - lib/scala-library-2.11.8-javadoc.jar
  - /opt/docs/guava-19.0-javadoc.jar
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.prefix == "api/docs"
    assert config.java_version == "1.8.0_92"
    assert config.doc_jars == [
        root / "lib" / "scala-library-2.11.8-javadoc.jar",
        Path("/opt/docs/guava-19.0-javadoc.jar"),
    ]


def test_load_config_accepts_unquoted_version(tmp_path: Path) -> None:
    (tmp_path / ".docresolver.yml").write_text("java_version: 1.7\n", encoding="utf-8")

    assert load_config(tmp_path).java_version == "1.7"


def test_environment_overrides_java_version(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".docresolver.yml").write_text("java_version: '1.7.0'\n", encoding="utf-8")
    monkeypatch.setenv(JAVA_VERSION_ENV, "1.8.0_101")

    assert load_config(tmp_path).java_version == "1.8.0_101"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".docresolver.yml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".docresolver.yml").write_text("doc_jars: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_non_list_jars(tmp_path: Path) -> None:
    (tmp_path / ".docresolver.yml").write_text("doc_jars:\n  a: b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
