"""Unit test configuration.

Unit tests are isolated: the CMS is mocked with AsyncMock or respx.
"""

import pytest


# Mark all tests in this directory as unit tests
pytestmark = pytest.mark.unit
