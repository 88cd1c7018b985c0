"""
Provider package: lifecycle framework for long-lived services that own
pooled resources.

Architecture:
- Provider: service object activated once and shut down once
- ProviderFactory: creates and destroys providers of one type, with its own lifecycle
- Resource: handle opened from a provider and closed deterministically

Design Patterns:
- Template Method: skeleton bases own the state machine, subclasses own the hooks
- Factory Pattern: providers are built by their factory

Cross-cutting:
- Lifecycle flags are atomic booleans moved by compare-and-set
- Hook failures roll the flags back and propagate
"""

from .errors import AbortOperationError, NotEnoughResourceError, OperationTimeoutError, ProviderError
from .factory import AbstractProviderFactory, ProviderFactory
from .lifecycle import Lifecycle, grace_deadlines
from .provider import AbstractProvider, Provider
from .resource import AbstractResource, Resource

__all__ = [
    "AbortOperationError",
    "NotEnoughResourceError",
    "OperationTimeoutError",
    "ProviderError",
    "AbstractProviderFactory",
    "ProviderFactory",
    "Lifecycle",
    "grace_deadlines",
    "AbstractProvider",
    "Provider",
    "AbstractResource",
    "Resource",
]
