import pytest
from smart_select_tree_sitter import SyntaxNode

OBJECT_SOURCE = "const x = { a: 1, b: 2 };"
JSX_SOURCE = '<Foo bar={1} baz="x" />'


def node(kind, full_start, start, end, *children):
    return SyntaxNode(kind=kind, full_start=full_start, start=start, end=end, children=tuple(children))


@pytest.fixture
def object_tree():
    """Tree for OBJECT_SOURCE shaped like the converted tree-sitter TypeScript tree"""
    return node(
        "program", 0, 0, 25,
        node(
            "lexical_declaration", 0, 0, 25,
            node(
                "variable_declarator", 5, 6, 24,
                node("identifier", 5, 6, 7),
                node(
                    "object", 9, 10, 24,
                    node(
                        "pair", 11, 12, 16,
                        node("property_identifier", 11, 12, 13),
                        node("number", 14, 15, 16),
                    ),
                    node(
                        "pair", 17, 18, 22,
                        node("property_identifier", 17, 18, 19),
                        node("number", 20, 21, 22),
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def jsx_tree():
    """Tree for JSX_SOURCE with attributes grouped under jsx_attributes"""
    return node(
        "program", 0, 0, 23,
        node(
            "expression_statement", 0, 0, 23,
            node(
                "jsx_self_closing_element", 0, 0, 23,
                node("identifier", 1, 1, 4),
                node(
                    "jsx_attributes", 4, 5, 20,
                    node(
                        "jsx_attribute", 4, 5, 12,
                        node("property_identifier", 4, 5, 8),
                        node("jsx_expression", 8, 9, 12, node("number", 10, 10, 11)),
                    ),
                    node(
                        "jsx_attribute", 12, 13, 20,
                        node("property_identifier", 12, 13, 16),
                        node("string", 16, 17, 20, node("string_fragment", 18, 18, 19)),
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def nested_parens():
    """((((((((((x)))))))))) as ten nested nodes around an identifier"""
    text = "(" * 10 + "x" + ")" * 10
    inner = node("identifier", 10, 10, 11)
    for depth in range(9, -1, -1):
        inner = node("parenthesized_expression", depth, depth, len(text) - depth, inner)
    return text, node("program", 0, 0, len(text), inner)
