import textwrap

from hardcoded_strings_lint.frontends import SourceParseError, parse_python_source
from hardcoded_strings_lint.syntax import (
    PYTHON,
    BlockNode,
    InstanceCreationNode,
    NamedArgumentNode,
    StringLiteralNode,
    SyntaxKind,
)
from tests._shared_cases import python_source


def _creations(source: str, **kwargs: object) -> list[InstanceCreationNode]:
    unit = parse_python_source(source, **kwargs)  # type: ignore[arg-type]
    return [node for node in unit.root.descendants() if isinstance(node, InstanceCreationNode)]


def test_unit_carries_python_profile_and_path() -> None:
    unit = parse_python_source("x = 1\n", path="app.py")

    assert unit.profile is PYTHON
    assert unit.path == "app.py"
    assert unit.root.kind == SyntaxKind.COMPILATION_UNIT
    assert (unit.root.start, unit.root.end) == (0, len("x = 1\n"))


def test_calls_to_local_classes_become_instance_creations() -> None:
    creations = _creations(python_source('Label("Hi there")\nprint("Hi there")\n'))

    assert len(creations) == 1
    static_type = creations[0].static_type
    assert static_type is not None
    assert [link.name for link in static_type.chain()] == ["Label", "Widget"]


def test_known_types_resolve_imported_classes() -> None:
    source = 'from tkinter import ttk\nttk.Label(text="Hi there")\n'

    assert _creations(source) == []
    creations = _creations(source, known_types={"Label": "Widget"})
    assert len(creations) == 1
    assert creations[0].static_type is not None
    assert [link.name for link in creations[0].static_type.chain()] == ["Label", "Widget"]


def test_unknown_base_becomes_terminal_type_and_cycles_terminate() -> None:
    source = textwrap.dedent(
        """\
        class Screen(StatelessWidget):
            pass


        class A(B):
            pass


        class B(A):
            pass


        Screen()
        A()
        """
    )

    creations = _creations(source)

    chains = [[link.name for link in node.static_type.chain()] for node in creations if node.static_type]
    assert chains == [["Screen", "StatelessWidget"], ["A", "B", "A"]]


def test_keyword_arguments_become_named_arguments_in_source_order() -> None:
    source = python_source('Label("First one", title="Second one")\n')
    unit = parse_python_source(source)

    (creation,) = [node for node in unit.root.descendants() if isinstance(node, InstanceCreationNode)]
    argument_list = creation.argument_list
    assert argument_list is not None
    first, second = argument_list.children
    assert isinstance(first, StringLiteralNode)
    assert first.value == "First one"
    assert isinstance(second, NamedArgumentNode)
    assert second.label == "title"
    assert isinstance(second.expression, StringLiteralNode)
    assert unit.text_of(second.expression) == '"Second one"'


def test_offsets_are_character_offsets() -> None:
    source = python_source('Label("日本語のテキスト", title="Ünïcödé text")\n')
    unit = parse_python_source(source)

    texts = [unit.text_of(literal) for literal in unit.string_literals() if literal.value and "text" in literal.value]
    assert texts == ['"Ünïcödé text"']
    first = next(literal for literal in unit.string_literals() if literal.value == "日本語のテキスト")
    assert unit.text_of(first) == '"日本語のテキスト"'


def test_f_strings_have_no_value_and_keep_expressions() -> None:
    unit = parse_python_source('name = "x"\nmessage = f"Hello {name.upper()}"\n')

    literals = list(unit.string_literals())
    assert [literal.value for literal in literals] == ["x", None]
    assert literals[1].children


def test_function_body_insertion_point_skips_docstring() -> None:
    source = textwrap.dedent(
        '''\
        def build():
            """Build it."""
            return 1
        '''
    )
    unit = parse_python_source(source)

    (body,) = [node for node in unit.root.descendants() if node.kind == SyntaxKind.BLOCK_FUNCTION_BODY]
    assert isinstance(body, BlockNode)
    assert body.insert_offset == source.index("    return")
    assert body.indent == "    "
    assert body.render_member("x = 1") == "    x = 1\n"


def test_one_line_bodies_cannot_take_a_statement() -> None:
    unit = parse_python_source("def build(): return 1\nclass Empty: pass\n")

    bodies = [node for node in unit.root.descendants() if isinstance(node, BlockNode)]
    assert len(bodies) == 2
    assert all(body.insert_offset is None for body in bodies)


def test_methods_and_lambdas_are_lowered_to_callable_kinds() -> None:
    source = textwrap.dedent(
        """\
        class Screen:
            @property
            def title(self):
                return sorted(items, key=lambda item: item.name)
        """
    )
    unit = parse_python_source(source)

    kinds = {node.kind for node in unit.root.descendants()}
    assert {
        SyntaxKind.CLASS_DECLARATION,
        SyntaxKind.CLASS_BODY,
        SyntaxKind.METHOD_DECLARATION,
        SyntaxKind.BLOCK_FUNCTION_BODY,
        SyntaxKind.FUNCTION_EXPRESSION,
        SyntaxKind.EXPRESSION_FUNCTION_BODY,
        SyntaxKind.METHOD_INVOCATION,
    } <= kinds
    (class_body,) = [node for node in unit.root.descendants() if node.kind == SyntaxKind.CLASS_BODY]
    assert isinstance(class_body, BlockNode)
    assert class_body.insert_offset == source.index("    @property")


def test_dict_entries_and_subscripts_keep_positional_children() -> None:
    unit = parse_python_source('table = {"key one": "value one"}\nitem = table["key one"]\n')

    entry = next(node for node in unit.root.descendants() if node.kind == SyntaxKind.MAP_ENTRY)
    index = next(node for node in unit.root.descendants() if node.kind == SyntaxKind.INDEX_EXPRESSION)
    assert [getattr(child, "value", None) for child in entry.children] == ["key one", "value one"]
    assert isinstance(index.children[-1], StringLiteralNode)


def test_syntax_errors_raise_source_parse_error() -> None:
    try:
        parse_python_source("def broken(:\n", path="broken.py")
    except SourceParseError as exc:
        assert "broken.py" in str(exc)
        assert isinstance(exc, ValueError)
    else:
        raise AssertionError("Expected SourceParseError for invalid Python")
