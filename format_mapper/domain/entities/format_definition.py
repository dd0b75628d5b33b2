from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FormatDefinition:
    """A named display rule (format) paired with its reverse (informat).

    ``parse(render(v)) == v`` holds for every value in the rule's domain unless
    ``lossy`` is set; lossy definitions say how they lose information in
    ``description`` (typically rounding to fixed decimal places).
    """

    name: str
    renderer: Callable[[Any], str]
    parser: Callable[[str], Any]
    lossy: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Format name must be a non-empty string")
        if not callable(self.renderer) or not callable(self.parser):
            raise TypeError(f"Format {self.name!r} needs callable render and parse functions")

    def render(self, value: Any) -> str:
        return self.renderer(value)

    def parse(self, text: str) -> Any:
        return self.parser(text)
