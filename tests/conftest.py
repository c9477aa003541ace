"""Pytest configuration and fixtures for ingest-attachment tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest

from ingest_attachment.attachment.extractor import AttachmentResult, ExtractorBase
from ingest_attachment.attachment.processor import AttachmentProcessorFactory
from ingest_attachment.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    configure_logging(level="DEBUG")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_result() -> AttachmentResult:
    """Extraction result with every attribute populated."""
    return AttachmentResult(
        content="  Quarterly report\n\nRevenue grew.  ",
        title="Q3 Report",
        name="report.pdf",
        author="Finance Team",
        keywords="revenue, q3",
        content_type="application/pdf",
        content_length=1024,
        language="en",
        date="2016-03-10T21:00:00Z",
    )


@pytest.fixture
def mock_extractor(sample_result) -> Mock:
    """Extraction collaborator returning `sample_result`."""
    extractor = Mock(spec=ExtractorBase)
    extractor.extract.return_value = sample_result
    return extractor


@pytest.fixture
def factory(mock_extractor) -> AttachmentProcessorFactory:
    """Factory wired to the mock extraction collaborator."""
    return AttachmentProcessorFactory(extractor=mock_extractor)
