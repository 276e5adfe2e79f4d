import io
import sys
from pathlib import Path
from typing import Generator

import httpx
import pytest

# Ensure local source package (src/payloadkit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def url() -> str:
    return "https://example.com/api/items"


@pytest.fixture
def client() -> Generator[httpx.Client, None, None]:
    """Provide a plain httpx client; pytest-httpx intercepts its transport."""
    with httpx.Client() as client:
        yield client


@pytest.fixture
def text_file(tmp_path: Path) -> Generator[io.BufferedReader, None, None]:
    """Provide an open binary handle on a small file."""
    file_path = tmp_path / "hello.txt"
    file_path.write_bytes(b"hello file")
    with open(file_path, "rb") as f:
        yield f
