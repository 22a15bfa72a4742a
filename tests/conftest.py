"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag every test under tests/unit as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Source fixtures
# ---------------------------------------------------------------------------

SAMPLE_SOURCE = """\
class Animal {
  name = "";
  #age = 0;
  constructor(name, age) {
    this.name = name;
    this.legs = 4;
  }
  speak() {
    return this.name;
  }
  static create(name) {
    return new Animal(name);
  }
}

class Dog extends Animal {
  constructor(name) {
    super(name);
    this.owner = new Owner();
  }
  bark(times, loud) {
    return "woof";
  }
}

class Owner {
}
"""


@pytest.fixture
def sample_source() -> str:
    return SAMPLE_SOURCE


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "animals.js"
    path.write_text(SAMPLE_SOURCE, encoding="utf-8")
    return path
