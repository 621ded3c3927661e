"""DomainClassifier protocol: services depend on this, not the concrete implementation."""

from typing import Protocol, Sequence


class DomainClassifier(Protocol):
    def is_academic(self, domain: str) -> bool: ...

    def matching_institutions(self, domain: str) -> Sequence[str]: ...
