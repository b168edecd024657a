#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a visitor that renders syntax trees for the console."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.tree import Tree

from combparse.grammar.formatter import quote
from combparse.syntax.nodes import SyntaxNodeVisitor


if TYPE_CHECKING:
    from combparse.syntax.nodes import EpsilonNode
    from combparse.syntax.nodes import OrderedChoiceNode
    from combparse.syntax.nodes import SequenceNode
    from combparse.syntax.nodes import SyntaxNode
    from combparse.syntax.nodes import TerminalNode


class SyntaxTreeRenderer(SyntaxNodeVisitor[Tree]):
    """A visitor that converts a syntax tree into a rich tree."""

    def visit_terminal(self, node: TerminalNode) -> Tree:  # noqa: D102
        return Tree(f"[green]terminal[/green] {escape(quote(node.text))}")

    def visit_epsilon(self, node: EpsilonNode) -> Tree:  # noqa: D102
        return Tree("[green]epsilon[/green]")

    def visit_sequence(self, node: SequenceNode) -> Tree:  # noqa: D102
        tree = Tree(f"[blue]sequence[/blue] {escape(quote(node.text))}")
        for child in node.children:
            tree.children.append(child.accept(self))
        return tree

    def visit_ordered_choice(self, node: OrderedChoiceNode) -> Tree:  # noqa: D102
        tree = Tree(
            f"[magenta]ordered choice[/magenta] #{node.alternative} "
            f"{escape(quote(node.text))}"
        )
        tree.children.append(node.child.accept(self))
        return tree


def render_syntax_tree(node: SyntaxNode) -> Tree:
    """Render a syntax tree.

    Args:
        node: The root of the syntax tree.

    Returns:
        The rich tree, ready to be printed to a console.
    """
    return node.accept(SyntaxTreeRenderer())
