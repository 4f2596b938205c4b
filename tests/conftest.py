"""Pytest configuration and shared fixtures for ClauseGloss tests."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from clausegloss.config.loader import ENV_VAR_MAP

SAMPLE_PARAGRAPHS: list[str] = [
    "1. DEFINITIONS AND INTERPRETATION",
    '"Business Day" means a day other than a Saturday, Sunday or public '
    "holiday in London.",
    '"Clawback Amount" has the meaning set out in clause 9.2.',
    '"Commitment" means the amount committed by a Limited Partner to the '
    "Partnership;",
    '"Expenses" shall include all costs, charges and disbursements of the '
    "Manager:",
    '"Liability" includes any debt, obligation or loss of any kind.',
    '"Excess Distributions" has the meaning given in clause 10.1.4 below.',
    "9. CLAWBACK",
    "9.2 Following the final distribution, the General Partner shall return "
    "the amount by which contributions exceed distributions "
    '(the "Clawback Amount") to the Limited Partners.',
]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env(
    monkeypatch: pytest.MonkeyPatch, temp_dir: Path
) -> Generator[Path, None, None]:
    """Isolate configuration discovery from the developer's machine.

    Points HOME and the working directory at an empty temp directory and
    clears every CLAUSEGLOSS_* variable.

    Yields:
        The temporary home / working directory
    """
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.chdir(temp_dir)
    for env_name in ENV_VAR_MAP.values():
        monkeypatch.delenv(env_name, raising=False)
    yield temp_dir


@pytest.fixture
def sample_paragraphs() -> list[str]:
    """A small agreement with direct, cross-referenced and embedded terms."""
    return list(SAMPLE_PARAGRAPHS)


@pytest.fixture
def sample_document(temp_dir: Path, sample_paragraphs: list[str]) -> Path:
    """Write the sample agreement to a text file, one paragraph per line."""
    path = temp_dir / "agreement.txt"
    path.write_text("\n".join(sample_paragraphs) + "\n", encoding="utf-8")
    return path
