import pathlib

import pytest

from dimensional.core import iotools


def test_full_path(tmp_path: pathlib.Path):
    """Resolve existing paths and reject missing ones."""
    assert iotools.full_path(tmp_path) == tmp_path.resolve()
    with pytest.raises(iotools.NonExistentPathError) as exc:
        iotools.full_path(tmp_path / 'missing')
    assert str(exc.value).endswith('does not exist.')


def test_search(tmp_path: pathlib.Path):
    """Search directories in order, skipping missing entries."""
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    for directory in (first, second):
        directory.mkdir()
        (directory / 'settings.ini').write_text('')
    paths = [None, tmp_path / 'missing', first, second]
    found = iotools.search(paths, 'settings.ini')
    assert found == first.resolve() / 'settings.ini'
    assert iotools.search([None, tmp_path], 'settings.ini') is None
    assert iotools.search([first / 'settings.ini'], 'settings.ini') is None
