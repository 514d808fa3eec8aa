"""Testing utilities for padawan applications.

Provides a test client that drives the same dispatch path as
``App.run()``, without touching the process environment or stdout.

Usage::

    from padawan.testing import TestClient

    client = TestClient(app)
    reply = client.get("/greet/Luke")
    assert reply.body == "Hello Luke"
"""

from padawan.testing.client import TestClient

__all__ = ["TestClient"]
