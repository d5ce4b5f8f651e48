"""
Test configuration for the quote service tests.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio

# Add project root to path before importing our modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import our modules after path setup
from quote_service.api.models import QuotePayload  # noqa: E402
from quote_service.storage.quote_storage import QuoteStorage  # noqa: E402


@pytest_asyncio.fixture
async def temp_storage():
    """Create a temporary storage instance for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as tmp:
        storage = QuoteStorage(tmp.name)
        await storage.initialize()
        try:
            yield storage
        finally:
            await storage.close()
            try:
                os.unlink(tmp.name)
            except PermissionError:
                # On Windows, sometimes the file is still locked
                pass


@pytest.fixture
def sample_payloads():
    """Provide sample quote payloads for testing."""
    return [
        QuotePayload(book="Dune", quote="Fear is the mind-killer"),
        QuotePayload(book="Neuromancer", quote="The sky above the port was..."),
        QuotePayload(book="Hamlet", quote="To be, or not to be"),
    ]
