from hardcoded_strings_lint.frontends import parse_python_source
from hardcoded_strings_lint.syntax import (
    BlockNode,
    ResolvedType,
    StringLiteralNode,
    SyntaxKind,
    SyntaxNode,
    cover_children,
)
from hardcoded_strings_lint.text import TextRange


def test_children_are_adopted_once_with_parent_links() -> None:
    first = StringLiteralNode(1, 4, "abc")
    second = SyntaxNode(SyntaxKind.OTHER, 5, 9)
    parent = cover_children(SyntaxKind.ARGUMENT_LIST, [first, second])

    assert (parent.start, parent.end) == (1, 9)
    assert first.parent is parent
    assert second.index_in_parent == 1
    assert list(first.ancestors()) == [parent]

    try:
        SyntaxNode(SyntaxKind.OTHER, 0, 10, [first])
    except ValueError as exc:
        assert "already has a parent" in str(exc)
    else:
        raise AssertionError("Expected ValueError when a node is adopted twice")


def test_invalid_spans_and_block_kinds_are_rejected() -> None:
    for build in (
        lambda: SyntaxNode(SyntaxKind.OTHER, 5, 2),
        lambda: BlockNode(SyntaxKind.OTHER, 0, 1, insert_offset=None, indent="", leading_newline=False),
    ):
        try:
            build()
        except ValueError:
            continue
        raise AssertionError("Expected ValueError")


def test_descendants_are_in_document_order() -> None:
    unit = parse_python_source('a = ("one", "two")\nb = "three"\n')

    assert [literal.value for literal in unit.string_literals()] == ["one", "two", "three"]


def test_string_literal_at_prefers_exact_then_overlapping_range() -> None:
    source = 'a = "first"\nb = "second"\n'
    unit = parse_python_source(source)
    start = source.index('"second"')

    exact = unit.string_literal_at(TextRange.from_offsets(start, start + len('"second"')))
    overlapping = unit.string_literal_at(TextRange.from_offsets(start + 2, start + 3))
    missing = unit.string_literal_at(TextRange.from_offsets(0, 1))

    assert exact is not None and exact.value == "second"
    assert overlapping is exact
    assert missing is None


def test_resolved_type_chain_is_nearest_first() -> None:
    text = ResolvedType("Text", ResolvedType("StatelessWidget", ResolvedType("Widget")))

    assert [link.name for link in text.chain()] == ["Text", "StatelessWidget", "Widget"]
