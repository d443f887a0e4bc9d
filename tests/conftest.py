import pathlib

import pytest

from dimensional.core import kernels


@pytest.fixture(autouse=True)
def workdir(tmp_path: pathlib.Path, monkeypatch) -> pathlib.Path:
    """An empty working directory and home directory for each test.

    This keeps settings files on the host from changing the default kernel.
    """
    home = tmp_path / 'home'
    home.mkdir()
    work = tmp_path / 'work'
    work.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.delenv('DIMENSIONAL_INI', raising=False)
    monkeypatch.chdir(work)
    kernels.default.cache_clear()
    yield work
    kernels.default.cache_clear()
