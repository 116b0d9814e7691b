"""
Generic result container for pydescent computations.

Backends return a Result wrapping a domain-specific parameter payload.
The envelope carries what every run has in common (metadata, timing,
backend identity, non-fatal warnings, provenance) so the payload only
holds the fitted quantities.

Design decisions:
    - Generic over payload P
    - info dict for run metadata (stop reason, backoffs, device)
    - timing optional so tests can build Results by hand
    - Frozen: a fit is never edited after the fact, only replaced
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from pydescent import __version__

    return {
        'pydescent_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific payload (e.g. DescentParams)
        info: Run metadata (method, stop_reason, n_backoffs, ...)
        timing: Seconds per section plus 'total_seconds', or None
        backend_name: Identifier of the backend, '{device}_{algorithm}'
        warnings: Non-fatal issues encountered during the run
        provenance: Library versions, filled in automatically

    Example:
        >>> Result(
        ...     params=DescentParams(...),
        ...     info={'method': 'batch_gradient_descent', 'stop_reason': 'max_iters'},
        ...     timing={'total_seconds': 0.02, 'iterations': 0.019},
        ...     backend_name='cpu_gd',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
