from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.docs_builder import DocsBuilder

SAMPLE_DOCUMENT = "# Title\n\n## A\n\n### B\n\n## C\n"


@pytest.fixture
def docs_builder(tmp_path: Path) -> DocsBuilder:
    """Provide a reusable docs builder rooted at the pytest tmp_path."""
    return DocsBuilder(tmp_path)


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT
