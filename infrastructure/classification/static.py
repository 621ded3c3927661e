"""In-memory implementation of DomainClassifier.

Backed by a mapping of registered domain -> institution names, usually
loaded from a JSON file. A domain matches when it or any parent domain is
registered, so ``cs.stanford.edu`` resolves through ``stanford.edu``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

from errors import ConfigError
from shared.logging import get_logger

log = get_logger(__name__)


def normalize_domain(domain: str) -> str:
    domain = domain.strip().strip(".").lower()
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


class StaticDomainClassifier:
    def __init__(self, institutions: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        self._institutions: dict[str, tuple[str, ...]] = {
            normalize_domain(domain): tuple(names)
            for domain, names in (institutions or {}).items()
        }

    def __len__(self) -> int:
        return len(self._institutions)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "StaticDomainClassifier":
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(
                f"cannot load institutions file {path}: {e}", field="institutions_file"
            ) from e
        if not isinstance(raw, dict):
            raise ConfigError(
                "institutions file must contain a JSON object",
                field="institutions_file",
            )
        classifier = cls(raw)
        log.info("institutions_loaded", path=str(path), domains=len(classifier))
        return classifier

    def _lookup(self, domain: str) -> tuple[str, ...]:
        labels = normalize_domain(domain).split(".")
        # Walk from the full domain up to its registrable parents
        for i in range(len(labels) - 1):
            names = self._institutions.get(".".join(labels[i:]))
            if names is not None:
                return names
        return ()

    def is_academic(self, domain: str) -> bool:
        return bool(self._lookup(domain))

    def matching_institutions(self, domain: str) -> list[str]:
        return list(self._lookup(domain))
