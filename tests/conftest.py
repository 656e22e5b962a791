from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

from niquests import Session
from pytest import fixture

from wandbox.models import Compiler

data_dir = Path(__file__).parent / "data"


@fixture
def list_json() -> bytes:
    return (data_dir / "list.json").read_bytes()


@fixture
def compilers(list_json: bytes) -> list[Compiler]:
    from pydantic import TypeAdapter

    return TypeAdapter(list[Compiler]).validate_json(list_json)


@fixture
def make_response() -> Callable[..., MagicMock]:
    def _make_response(content: bytes, status_code: int = 200) -> MagicMock:
        return MagicMock(
            status_code=status_code,
            ok=200 <= status_code < 300,
            content=content,
        )

    return _make_response


@fixture
def session() -> MagicMock:
    return MagicMock(spec=Session)
