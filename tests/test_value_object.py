from pathlib import Path

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError

from scoped_tmpdir import BadRequest
from scoped_tmpdir import Prefix
from scoped_tmpdir import RETRIES
from scoped_tmpdir import SUFFIX_LENGTH
from scoped_tmpdir import TmpDirOptions

PrefixTA = TypeAdapter(Prefix)


@pytest.fixture
def options():
    return TmpDirOptions(dir=Path("/tmp"), prefix="foo")


def test_defaults():
    options = TmpDirOptions()

    assert options.dir is None
    assert options.prefix == ""
    assert options.suffix_length == SUFFIX_LENGTH == 12
    assert options.retries == RETRIES == 2**31


@pytest.mark.parametrize("value", ["", "foo", "foo.bar", "my-export_1"])
def test_valid_prefix(value: str):
    PrefixTA.validate_python(value)


@pytest.mark.parametrize("value", ["a/b", "a\\b", "a\x00b"])
def test_invalid_prefix(value: str):
    with pytest.raises(ValidationError):
        PrefixTA.validate_python(value)


def test_validator():
    with pytest.raises(ValidationError) as e:
        TmpDirOptions(prefix="a/b")

    assert e.type is ValidationError  # not BadRequest


@pytest.mark.parametrize(
    "values", [{"prefix": "a/b"}, {"suffix_length": 0}, {"retries": 0}]
)
def test_create_err(values):
    with pytest.raises(BadRequest):
        TmpDirOptions.create(**values)


def test_create(options):
    assert TmpDirOptions.create(dir=Path("/tmp"), prefix="foo") == options


def test_frozen(options):
    with pytest.raises(ValidationError):
        options.prefix = "bar"


def test_hashable(options):
    assert len({options, options}) == 1


def test_neq(options):
    assert options != TmpDirOptions(dir=Path("/tmp"), prefix="bar")
