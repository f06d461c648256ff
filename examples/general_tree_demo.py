from treesketch import Tree, TreeNode, TreeRenderer


def main() -> None:
    root = TreeNode(1)
    two = root.add(2)
    root.add(3)
    four = root.add(4)
    two.add(5)
    two.add(6)
    four.add(8)

    tree = Tree(root, renderer=TreeRenderer(line_style="unicode", highlight_style="bold green"))
    tree.sum_values()
    tree.count_evens()
    tree.num_greater(3)


if __name__ == "__main__":
    main()
