# presence_settings/models/theme_model.py
from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """
    An icon theme for the presence display. Immutable.

    Two Theme objects are equal when their names are equal; the description
    and icon mapping are not compared.
    """

    name: str
    description: str = field(default="", compare=False)
    icons: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    def __str__(self) -> str:
        return self.name
