import re
import tempfile
from pathlib import Path
from unittest import mock

import pytest

from scoped_tmpdir import Filesystem
from scoped_tmpdir import NamespaceExhausted
from scoped_tmpdir import TmpDir
from scoped_tmpdir import TmpDirOptions
from scoped_tmpdir import TmpDirProvider


@pytest.fixture
def provider(tmp_path: Path):
    return TmpDirProvider(TmpDirOptions(dir=tmp_path, prefix="export"))


def test_call(provider: TmpDirProvider, tmp_path: Path):
    with provider() as tmpdir:
        assert isinstance(tmpdir, TmpDir)
        assert tmpdir.path.parent == tmp_path
        assert re.fullmatch(r"export\.[a-z]{12}", tmpdir.path.name)

    assert not tmpdir.path.exists()


def test_call_twice(provider: TmpDirProvider):
    with provider() as first, provider() as second:
        assert first.path != second.path


def test_connect_disconnect(provider: TmpDirProvider):
    provider.connect()
    provider.disconnect()


def test_default_options(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))

    with TmpDirProvider()() as tmpdir:
        assert tmpdir.path.parent == tmp_path
        assert re.fullmatch(r"[a-z]{12}", tmpdir.path.name)


def test_suffix_length(tmp_path: Path):
    provider = TmpDirProvider(TmpDirOptions(dir=tmp_path, suffix_length=5))

    with provider() as tmpdir:
        assert re.fullmatch(r"[a-z]{5}", tmpdir.path.name)


def test_retries():
    filesystem = mock.Mock(Filesystem)
    filesystem.create_dir.side_effect = FileExistsError
    provider = TmpDirProvider(
        TmpDirOptions(dir=Path("/parent").absolute(), retries=2), filesystem
    )

    with pytest.raises(NamespaceExhausted):
        provider()

    assert filesystem.create_dir.call_count == 2
