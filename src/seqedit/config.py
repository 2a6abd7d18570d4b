from __future__ import annotations

"""Query models for the command-line front end."""

from typing import Any, List, Literal, Tuple

from pydantic import BaseModel, ValidationError

Unit = Literal["char", "word"]


class DistanceQuery(BaseModel):
    """A pair of strings plus how to split them into comparable elements."""

    first: str
    second: str
    unit: Unit = "char"
    case_sensitive: bool = True

    def tokens(self) -> Tuple[List[str], List[str]]:
        return self._split(self.first), self._split(self.second)

    def _split(self, text: str) -> List[str]:
        if not self.case_sensitive:
            text = text.lower()
        if self.unit == "word":
            return text.split()
        return list(text)


def build_query(**fields: Any) -> DistanceQuery:
    """Validate raw field values into a :class:`DistanceQuery`."""

    try:
        return DistanceQuery.model_validate(fields)
    except ValidationError as exc:
        raise ValueError(f"Invalid distance query: {exc}") from exc
