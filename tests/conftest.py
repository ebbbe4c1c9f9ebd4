import textwrap
from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write


@pytest.fixture
def cfg_file(tmp_path: Path):
    """Formatter config with a non-default tab width."""
    return write(
        tmp_path / "wschanges.yaml",
        textwrap.dedent("""
        schema_version: 1
        tab_width: 8
        """).strip() + "\n",
    )
