"""Per-language rendering data used by suppression scanning and fixes."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class LanguageProfile:
    """How comments and extracted constants are written in one language."""

    name: str
    comment_prefix: str
    local_constant_template: str
    static_constant_template: str
    # Whether code inside a method body or comprehension can name a class-body constant unqualified.
    class_members_visible_in_functions: bool = True

    def local_constant(self, name: str, value_source: str) -> str:
        return self.local_constant_template.format(name=name, value=value_source)

    def static_constant(self, name: str, value_source: str) -> str:
        return self.static_constant_template.format(name=name, value=value_source)


DART: Final[LanguageProfile] = LanguageProfile(
    name="dart",
    comment_prefix="//",
    local_constant_template="const {name} = {value};",
    static_constant_template="static const {name} = {value};",
)

PYTHON: Final[LanguageProfile] = LanguageProfile(
    name="python",
    comment_prefix="#",
    local_constant_template="{name} = {value}",
    static_constant_template="{name} = {value}",
    class_members_visible_in_functions=False,
)

PROFILES: Final[dict[str, LanguageProfile]] = {
    DART.name: DART,
    PYTHON.name: PYTHON,
}
