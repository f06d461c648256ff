from treesketch import BinaryTree, BinaryTreeNode

N = BinaryTreeNode


def build() -> BinaryTree:
    return BinaryTree(N(6, N(5, N(3, N(-2)), N(1)), N(5, right=N(7))))


def main() -> None:
    tree = build()
    root = tree.root
    tree.log("sample tree")

    print("min depth:", tree.min_depth())
    print("max depth:", tree.max_depth())
    print("next larger than 4:", tree.next_larger(4))
    print("max path sum:", tree.max_sum())

    a, b = root.left.left, root.right.right
    tree.log("cousin check", {a, b})
    print("cousins:", tree.are_cousins(a, b))

    ancestor = tree.lowest_common_ancestor(a, root.left.right)
    tree.log("lowest common ancestor", {ancestor})

    text = BinaryTree.serialize(tree)
    print("serialized:", text)
    BinaryTree.deserialize(text).log("deserialized copy")


if __name__ == "__main__":
    main()
