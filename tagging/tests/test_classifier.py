"""
Unit tests for classifier.py

Tests kind assignment over hand-built syntax nodes.
"""

import unittest

from tagging.classifier import container_kind, tag_kind
from tagging.syntax import NodeTag, SyntaxNode, SyntaxTree, Token


def _token(source: bytes, text: bytes) -> Token:
    start = source.index(text)
    return Token(start, start + len(text))


def _container_decl(source: bytes, keyword: bytes) -> SyntaxNode:
    return SyntaxNode(
        tag=NodeTag.CONTAINER_DECL,
        kind_token=_token(source, keyword),
    )


class TestTagKind(unittest.TestCase):
    """Test the kind character chosen for each node shape."""

    def test_function(self):
        source = b"fn foo() void {}"
        tree = SyntaxTree(source=source, decls=())
        node = SyntaxNode(tag=NodeTag.FN_PROTO, name_token=_token(source, b"foo"))
        self.assertEqual(tag_kind(tree, node), "f")

    def test_struct_union_enum(self):
        for keyword, kind in ((b"struct", "s"), (b"union", "u"), (b"enum", "g")):
            source = b"const T = " + keyword + b" {};"
            tree = SyntaxTree(source=source, decls=())
            node = SyntaxNode(
                tag=NodeTag.VAR_DECL,
                name_token=_token(source, b"T"),
                init_node=_container_decl(source, keyword),
            )
            self.assertEqual(tag_kind(tree, node), kind, keyword)

    def test_unknown_container_keyword(self):
        source = b"const H = opaque {};"
        tree = SyntaxTree(source=source, decls=())
        node = SyntaxNode(
            tag=NodeTag.VAR_DECL,
            name_token=_token(source, b"H"),
            init_node=_container_decl(source, b"opaque"),
        )
        self.assertIsNone(tag_kind(tree, node))

    def test_error_set(self):
        source = b"const E = error{Oops};"
        tree = SyntaxTree(source=source, decls=())
        node = SyntaxNode(
            tag=NodeTag.VAR_DECL,
            name_token=_token(source, b"E"),
            init_node=SyntaxNode(tag=NodeTag.ERROR_SET_DECL),
        )
        self.assertEqual(tag_kind(tree, node), "r")

    def test_error_type(self):
        source = b"const E = anyerror;"
        tree = SyntaxTree(source=source, decls=())
        node = SyntaxNode(
            tag=NodeTag.VAR_DECL,
            name_token=_token(source, b"E"),
            init_node=SyntaxNode(tag=NodeTag.ERROR_TYPE),
        )
        self.assertEqual(tag_kind(tree, node), "r")

    def test_plain_variable(self):
        source = b"const x = 42;"
        tree = SyntaxTree(source=source, decls=())
        node = SyntaxNode(
            tag=NodeTag.VAR_DECL,
            name_token=_token(source, b"x"),
            init_node=SyntaxNode(tag=NodeTag.OTHER),
        )
        self.assertEqual(tag_kind(tree, node), "v")

    def test_variable_without_initializer(self):
        source = b"extern var y: i32;"
        tree = SyntaxTree(source=source, decls=())
        node = SyntaxNode(tag=NodeTag.VAR_DECL, name_token=_token(source, b"y"))
        self.assertEqual(tag_kind(tree, node), "v")

    def test_enum_field(self):
        tree = SyntaxTree(source=b"A,", decls=())
        node = SyntaxNode(
            tag=NodeTag.CONTAINER_FIELD,
            name_token=Token(0, 1),
            has_type_expr=False,
        )
        self.assertEqual(tag_kind(tree, node), "e")

    def test_typed_member(self):
        tree = SyntaxTree(source=b"x: i32,", decls=())
        node = SyntaxNode(
            tag=NodeTag.CONTAINER_FIELD,
            name_token=Token(0, 1),
            has_type_expr=True,
        )
        self.assertEqual(tag_kind(tree, node), "m")

    def test_other_shapes_have_no_kind(self):
        tree = SyntaxTree(source=b"", decls=())
        for tag in (
            NodeTag.OTHER,
            NodeTag.CONTAINER_DECL,
            NodeTag.ERROR_SET_DECL,
            NodeTag.ERROR_TYPE,
        ):
            self.assertIsNone(tag_kind(tree, SyntaxNode(tag=tag)), tag)

    def test_every_tag_is_dispatched(self):
        tree = SyntaxTree(source=b"", decls=())
        for tag in NodeTag:
            # Must not raise for any discriminator value.
            tag_kind(tree, SyntaxNode(tag=tag))


class TestContainerKind(unittest.TestCase):

    def test_missing_keyword(self):
        tree = SyntaxTree(source=b"", decls=())
        self.assertIsNone(container_kind(tree, SyntaxNode(tag=NodeTag.CONTAINER_DECL)))


if __name__ == "__main__":
    unittest.main()
