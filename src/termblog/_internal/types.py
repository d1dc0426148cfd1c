"""Shared type aliases used across termblog modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: zero-argument or ``request``-taking callable, sync or async
Handler: TypeAlias = Callable[..., Any]

# Error handler: receives (request, error?) and returns a response value
ErrorHandler: TypeAlias = Callable[..., Any]
