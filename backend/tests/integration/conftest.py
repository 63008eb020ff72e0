"""
Conftest for integration tests.

These tests drive the FastAPI app over HTTP or run its lifespan against the
shipped sheets. Every test here gets the 'integration' marker.
"""

import pytest

pytestmark = pytest.mark.integration
