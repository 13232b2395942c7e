import pytest
from fastapi.testclient import TestClient

from string_analyzer.database import JsonFilePersistence, StringStore
from string_analyzer.main import create_app
from string_analyzer.services.analyzer import analyze_string


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture
def persistence(tmp_path):
    return JsonFilePersistence(str(tmp_path / "strings.json"))


@pytest.fixture
def records():
    values = ["racecar", "hello", "level", "hello world", "A man a plan", "noon", "abcde"]
    return [analyze_string(value) for value in values]
