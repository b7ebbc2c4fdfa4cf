"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gmir.document import Document, load_document

if TYPE_CHECKING:
    from pathlib import Path

SCENARIO = "# Title\nSome very long sentence that must wrap across multiple screen columns for sure.\n=> /x.gmi Link text\n"

SAMPLE_GMI = """\
# Sample capsule

Welcome to the sample capsule.

## Links
=> gemini://example.org/ Example
=> /about.gmi About this capsule
* first item
* second item

### Code
```
def main():
\treturn 0
```
> A quotation.
"""


def make_document(text: str) -> Document:
    return load_document(text.encode())


@pytest.fixture
def scenario_document() -> Document:
    return make_document(SCENARIO)


@pytest.fixture
def sample_document() -> Document:
    return make_document(SAMPLE_GMI)


@pytest.fixture
def sample_gmi_file(tmp_path: Path) -> Path:
    """Create a temporary gemtext file with sample content."""
    gmi_file = tmp_path / "index.gmi"
    gmi_file.write_text(SAMPLE_GMI)
    return gmi_file


@pytest.fixture
def sample_gmi() -> str:
    return SAMPLE_GMI
