"""Test utilities for termblog applications::

    from termblog.testing import TestClient
"""

from termblog.testing.client import TestClient

__all__ = ["TestClient"]
