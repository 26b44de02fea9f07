"""Decide whether a literal is an argument of a widget construction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Protocol

from hardcoded_strings_lint.syntax import (
    CALLABLE_BOUNDARY_KINDS,
    InstanceCreationNode,
    ResolvedType,
    SyntaxKind,
    SyntaxNode,
)


class ArgumentScope(StrEnum):
    """How close to a widget construction a literal must sit to be reported."""

    DIRECT = "direct"
    ANCESTOR = "ancestor"


WIDGET_BASE_CLASSES: Final[frozenset[str]] = frozenset(
    {
        "Widget",
        "StatelessWidget",
        "StatefulWidget",
        "InheritedWidget",
        "RenderObjectWidget",
        "LeafRenderObjectWidget",
        "SingleChildRenderObjectWidget",
        "MultiChildRenderObjectWidget",
        "ProxyWidget",
        "ParentDataWidget",
        "InheritedTheme",
        "PreferredSizeWidget",
    }
)


class WidgetCapability(Protocol):
    """Answers whether a resolved type is a UI component."""

    def is_widget(self, static_type: ResolvedType | None) -> bool: ...


@dataclass(frozen=True, slots=True)
class BaseClassAllowlist:
    """Widget-ness by name: some link of the supertype chain is a known base class."""

    base_classes: frozenset[str] = WIDGET_BASE_CLASSES

    def is_widget(self, static_type: ResolvedType | None) -> bool:
        if static_type is None:
            return False
        return any(link.name in self.base_classes for link in static_type.chain())


def owning_argument_list(literal: SyntaxNode) -> SyntaxNode | None:
    """The argument list holding `literal` itself or as a named argument's value."""
    parent = literal.parent
    if parent is not None and parent.kind == SyntaxKind.NAMED_ARGUMENT:
        parent = parent.parent
    if parent is not None and parent.kind == SyntaxKind.ARGUMENT_LIST:
        return parent
    return None


def is_direct_widget_argument(literal: SyntaxNode, capability: WidgetCapability) -> bool:
    current = literal.parent
    while current is not None and current.kind != SyntaxKind.ARGUMENT_LIST:
        if current.kind in CALLABLE_BOUNDARY_KINDS:
            return False
        current = current.parent
    if current is None or owning_argument_list(literal) is not current:
        return False
    construction = current.parent
    if not isinstance(construction, InstanceCreationNode):
        return False
    return capability.is_widget(construction.static_type)


def is_within_widget_construction(literal: SyntaxNode, capability: WidgetCapability) -> bool:
    """Looser check: any enclosing widget construction short of a callback body."""
    for ancestor in literal.ancestors():
        if ancestor.kind in CALLABLE_BOUNDARY_KINDS:
            return False
        if isinstance(ancestor, InstanceCreationNode) and capability.is_widget(ancestor.static_type):
            return True
    return False


def is_widget_argument(
    literal: SyntaxNode,
    scope: ArgumentScope,
    capability: WidgetCapability,
) -> bool:
    if scope == ArgumentScope.ANCESTOR:
        return is_within_widget_construction(literal, capability)
    return is_direct_widget_argument(literal, capability)
