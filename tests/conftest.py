import sys
import textwrap
import uuid
from pathlib import Path

import pytest

from objadapt.core import clear_cache

MODELS_SOURCE = textwrap.dedent(
    """
    from dataclasses import dataclass


    @dataclass
    class User:
        name: str
        age: int = 0
        email: str = None

        def getAge(self):
            return 30

        def isAdmin(self):
            return self.name == "root"


    class Broken:
        def getValue(self):
            raise RuntimeError("boom")


    def make_user(name="Alice"):
        return User(name=name)


    def explode():
        raise OSError("no database")


    def nothing():
        return None


    class Plain:
        def __init__(self):
            self.title = "Dr"


    ALICE = User(name="Alice")
    """
)


@pytest.fixture(autouse=True)
def fresh_resolution_cache():
    """Start and finish each test with an empty process-wide cache."""

    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def models_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable module of model factories and return its name."""

    name = f"probe_models_{uuid.uuid4().hex}"
    (tmp_path / f"{name}.py").write_text(MODELS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    yield name
    sys.modules.pop(name, None)
