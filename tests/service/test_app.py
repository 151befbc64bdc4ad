"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from docresolver.indexer import ArchiveIndexer
from docresolver.resolver import UriResolver
from docresolver.service import create_app
from tests._fixtures.archive_builder import JAVADOC7_INDEX, ArchiveBuilder


@pytest.fixture
def client(archive_builder: ArchiveBuilder) -> TestClient:
    jar = archive_builder.write(
        "foo-docs.jar",
        {"index.html": JAVADOC7_INDEX, "com/foo/Bar.html": "<html/>"},
    )
    scala = archive_builder.write("lib-scaladoc.jar", {"com/foo/Baz.html": "<html/>"})
    resolver = UriResolver(ArchiveIndexer().scan([jar, scala]), java_version="1.8.0")
    return TestClient(create_app(lambda: resolver))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "archives": 2}


def test_resolve_symmetric_sig(client: TestClient) -> None:
    response = client.post(
        "/resolve",
        json={"sig": {"pack": "com.foo", "type_name": "Bar", "member": "baz"}},
    )
    assert response.status_code == 200
    assert response.json() == {"found": True, "uri": "docs/foo-docs.jar/com/foo/Bar.html#baz"}


def test_resolve_pair(client: TestClient) -> None:
    response = client.post(
        "/resolve",
        json={
            "scala": {"pack": "com.foo", "type_name": "Baz", "member": "run:Unit"},
            "java": {"pack": "com.foo", "type_name": "Baz", "member": "run()"},
        },
    )
    assert response.status_code == 200
    assert response.json()["uri"] == "docs/lib-scaladoc.jar/index.html#com.foo.Baz@run:Unit"


def test_resolve_well_known_fallback(client: TestClient) -> None:
    response = client.post(
        "/resolve",
        json={"java": {"pack": "java.util", "type_name": "List", "member": "add(E)"}},
    )
    assert response.json() == {
        "found": True,
        "uri": "http://docs.oracle.com/javase/8/docs/api/java/util/List.html#add-E-",
    }


def test_resolve_not_found(client: TestClient) -> None:
    response = client.post(
        "/resolve",
        json={"sig": {"pack": "org.example", "type_name": "Missing"}},
    )
    assert response.status_code == 200
    assert response.json() == {"found": False, "uri": None}


def test_resolve_requires_a_signature(client: TestClient) -> None:
    response = client.post("/resolve", json={})
    assert response.status_code == 400
