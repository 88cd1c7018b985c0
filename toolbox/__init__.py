"""toolbox: general purpose utilities and a provider lifecycle framework

This package collects small standalone helpers together with a few components
that carry state and concurrency guarantees.

Responsibilities:
    - Provider, provider factory and resource lifecycles
    - Sharded UUID generation with a miss cache
    - Settings loading and descriptor driven injection
    - Timer queue ordered by absolute expiry
    - JSON serialization facade
    - Hex, number, boolean and date formatters, CRC64, validations

Cross-cutting Concerns:
    Thread Safety:
        - Lifecycle flags are atomic and transition by compare-and-set
        - Settings, timer queue and uuid cache are lock protected
        - Per-thread scratchpads live in thread-local storage

    Error Handling:
        - Every library error derives from ToolboxError
        - Invalid caller input raises ValueError
        - Wrong lifecycle state raises IllegalStateError

    Logging:
        - Standard library logging, one logger per module
        - No handlers installed by the library
"""

from toolbox.errors import IllegalStateError, ToolboxError

__version__ = "0.1.0"

__all__ = ["IllegalStateError", "ToolboxError", "__version__"]
