from pathlib import Path

import pytest

from MiniLang_Parser.Main import read_source

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def resource():
    def _load(name):
        return read_source(RESOURCES / name)
    return _load
