"""Front-end neutral syntax kinds."""

from enum import IntEnum


class SyntaxKind(IntEnum):
    """Node vocabulary shared by every tree front end.

    Front ends map their own node types onto this set; anything the lint
    engine does not need to distinguish is lowered to `OTHER`.
    """

    OTHER = 0

    COMPILATION_UNIT = 1

    # Declarations and bodies
    CLASS_DECLARATION = 10
    CLASS_BODY = 11
    METHOD_DECLARATION = 12
    FUNCTION_DECLARATION = 13
    FUNCTION_EXPRESSION = 14
    BLOCK_FUNCTION_BODY = 15
    EXPRESSION_FUNCTION_BODY = 16
    COMPREHENSION = 17  # own scope; class-body names are not visible inside

    # Invocations
    INSTANCE_CREATION = 20
    METHOD_INVOCATION = 21
    ARGUMENT_LIST = 22
    NAMED_ARGUMENT = 23

    # Expressions the classifier inspects
    STRING_LITERAL = 30
    INDEX_EXPRESSION = 31  # children: (target, index)
    MAP_LITERAL = 32
    MAP_ENTRY = 33  # children: (key, value)


CALLABLE_BOUNDARY_KINDS: frozenset[SyntaxKind] = frozenset(
    {
        SyntaxKind.FUNCTION_EXPRESSION,
        SyntaxKind.BLOCK_FUNCTION_BODY,
        SyntaxKind.EXPRESSION_FUNCTION_BODY,
    }
)

BLOCK_KINDS: frozenset[SyntaxKind] = frozenset(
    {
        SyntaxKind.BLOCK_FUNCTION_BODY,
        SyntaxKind.CLASS_BODY,
    }
)
