from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping

from doc_sidebar.utils.errors import MissingFieldError, ValidationError
from doc_sidebar.utils.logging import logger

@dataclass(frozen=True)
class RenderConfig:
    """Values interpolated into the sidebar fragment.

    Substituted verbatim: nothing here is escaped or URL-checked.
    """
    base: str
    host: str
    path: str
    package: str
    version: str

    def __post_init__(self):
        names = self.field_names()
        missing = [n for n in names if getattr(self, n) is None]
        if missing:
            raise MissingFieldError(missing)
        wrong = [n for n in names if not isinstance(getattr(self, n), str)]
        if wrong:
            raise ValidationError(f"Sidebar field(s) must be strings: {', '.join(wrong)}")

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RenderConfig":
        names = cls.field_names()
        extra = sorted(set(data) - set(names))
        if extra:
            logger.debug("RenderConfig: ignoring unknown keys %s", extra)
        return cls(**{n: data.get(n) for n in names})

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
