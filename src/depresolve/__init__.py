"""depresolve: Dependency closure and install-order scheduling for named items."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
