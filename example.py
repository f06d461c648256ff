from rich import print

from treesketch import BinaryTree, render


def main() -> None:
    tree = BinaryTree.deserialize("[8,4,12,2,6,10,14,1,3]")
    print(render(tree.root, "level-order [8,4,12,2,6,10,14,1,3]", {tree.root.left}))


if __name__ == "__main__":
    main()
