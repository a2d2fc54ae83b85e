from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from projdata.templating import BUILTIN_TEMPLATES_DIR

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def templates_fs(fs: FakeFilesystem) -> FakeFilesystem:
    """Fake filesystem with the built-in templates mapped in read-only."""
    fs.add_real_directory(BUILTIN_TEMPLATES_DIR)
    return fs
