from __future__ import annotations

from collections import deque
from types import SimpleNamespace

import pytest

from treesketch import BinaryTreeNode, ConfigurationError, Slot, TreeNode
from treesketch.layout_components.layout import TreeArena, TreeLayout, round_half_up
from treesketch.layout_components.node import children_of, display_value


def full_tree(depth: int, start: int = 1) -> BinaryTreeNode:
    node = BinaryTreeNode(start)
    if depth > 0:
        node.left = full_tree(depth - 1, start * 2)
        node.right = full_tree(depth - 1, start * 2 + 1)
    return node


def layout_for(root, **kwargs) -> tuple[TreeArena, TreeLayout]:
    arena = TreeArena(root)
    texts = [display_value(node) for node in arena.nodes]
    layout = TreeLayout(arena, texts, **kwargs)
    layout.apply()
    return arena, layout


def test_round_half_up_matches_schoolbook_rounding() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(-1.5) == -1


def test_children_of_prefers_binary_fields() -> None:
    left = BinaryTreeNode(2)
    right = BinaryTreeNode(3)
    node = BinaryTreeNode(1, left, right)
    node.children = [BinaryTreeNode(9)]
    assert children_of(node) == [(left, Slot.LEFT), (right, Slot.RIGHT)]

    only = BinaryTreeNode(1, right=right)
    assert children_of(only) == [(right, Slot.BELOW)]


def test_children_of_falls_back_to_children_sequence() -> None:
    kids = [TreeNode(2), TreeNode(3)]
    node = TreeNode(1, kids)
    assert children_of(node) == [(kids[0], Slot.SPREAD), (kids[1], Slot.SPREAD)]
    assert children_of(BinaryTreeNode(1)) == []


def test_arena_numbers_nodes_in_preorder() -> None:
    root = full_tree(2)
    arena = TreeArena(root)
    assert [node.value for node in arena.nodes] == [1, 2, 4, 5, 3, 6, 7]
    assert arena.max_depth == 2
    assert arena.index_of(root.right) == 4
    assert arena.index_of(BinaryTreeNode(3)) is None
    assert len(arena.edges()) == 6


def test_every_node_gets_one_position() -> None:
    arena, layout = layout_for(full_tree(3))
    assert len(layout.positions) == len(arena) == 15


def test_initial_offset_follows_depth() -> None:
    assert layout_for(BinaryTreeNode(1))[1].initial_offset() == 1
    assert layout_for(full_tree(1))[1].initial_offset() == 2
    assert layout_for(full_tree(3))[1].initial_offset() == 8


def test_root_sits_at_origin_without_padding() -> None:
    _, layout = layout_for(BinaryTreeNode(1, right=BinaryTreeNode(2)), left_padding=0)
    root = layout.positions[0]
    assert (root.x, root.y) == (0, 0)


def test_left_children_left_and_right_children_right() -> None:
    arena, layout = layout_for(full_tree(3))
    positions = layout.positions
    for index, kids in enumerate(arena.children):
        for child, slot in kids:
            if slot == Slot.LEFT:
                assert positions[child].x < positions[index].x
            elif slot == Slot.RIGHT:
                assert positions[child].x > positions[index].x
            assert positions[child].y > positions[index].y


def test_canvas_size_covers_all_text() -> None:
    _, layout = layout_for(full_tree(2))
    assert min(position.start_x for position in layout.positions) == 1
    assert max(position.end_x for position in layout.positions) == layout.width - 2
    assert max(position.y for position in layout.positions) == layout.height - 1


def test_rows_per_offset_stretches_vertically() -> None:
    _, short = layout_for(full_tree(1))
    _, tall = layout_for(full_tree(1), rows_per_offset=2)
    assert short.height == 4
    assert tall.height == 6


def test_text_count_must_match_nodes() -> None:
    arena = TreeArena(full_tree(1))
    with pytest.raises(ConfigurationError):
        TreeLayout(arena, ["1"])


def test_children_of_accepts_any_sequence() -> None:
    kids = deque([TreeNode(2), TreeNode(3)])
    node = SimpleNamespace(val=1, children=kids)
    assert children_of(node) == [(kids[0], Slot.SPREAD), (kids[1], Slot.SPREAD)]
    assert children_of(SimpleNamespace(val=1, children="ab")) == []
    assert len(TreeArena(node)) == 3
