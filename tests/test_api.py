"""Testes da API HTTP."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_run_success(client):
    response = client.post("/api/run", json={"code": "A = 2\nB = 8\nC = A + B\nC"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["outputs"] == [10]
    assert data["symbols"] == {"A": 2, "B": 8, "C": 10}
    assert data["errors"] == []


def test_run_failure(client):
    response = client.post("/api/run", json={"code": "A = 2 + 1\nA + B"})
    data = response.json()
    assert data["success"] is False
    assert data["failed_line"] == 2
    assert len(data["errors"]) == 1
    assert data["errors"][0].startswith("Linha 2")
    assert data["symbols"] == {"A": 3}


def test_run_requests_are_isolated(client):
    client.post("/api/run", json={"code": "A = 2"})
    data = client.post("/api/run", json={"code": "A"}).json()
    assert data["success"] is False


def test_run_requires_code(client):
    assert client.post("/api/run", json={}).status_code == 422


def test_classify(client):
    data = client.post("/api/classify", json={"code": "A = 2\nC = A + 9\nC\nA + B"}).json()
    assert data["success"] is False
    assert data["invalid_lines"] == [4]
    types = [i["type"] for i in data["instructions"]]
    assert types == ["Assignment", "Addition", "Return", "Invalid"]
    addition = data["instructions"][1]
    assert (addition["symbol"], addition["left"], addition["right"]) == ("C", "A", "9")
    assert [t["type"] for t in addition["tokens"]] == ["WORD", "ASSIGN", "WORD", "PLUS", "WORD"]


def test_examples(client):
    data = client.get("/api/examples").json()
    assert set(data) == {"soma", "reatribuicao", "literais", "erro_sintaxe"}
    assert data["soma"]["code"].endswith("C")


def test_run_example(client):
    data = client.get("/api/examples/reatribuicao/run").json()
    assert data["success"] is True
    assert data["outputs"] == [26]


def test_run_unknown_example(client):
    assert client.get("/api/examples/nada/run").status_code == 404


def test_run_literal_too_long(client):
    response = client.post("/api/run", json={"code": "A = " + "9" * 5000})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["failed_line"] == 1
