#!/usr/bin/env python3
"""
Minimal Evictree Demo
=====================

A very simple demo showing insert, search and delete on a tree
without any eviction.
"""

from evictree import BinarySearchTree, KeyNotFoundError, natural_order


def minimal_demo():
    """Minimal demo showing basic operations."""
    print("🚀 Minimal Evictree Demo")
    print("=" * 40)

    tree = BinarySearchTree(natural_order)

    # INSERT operation
    print("\n📝 Inserting data...")
    for key, value in [(50, "fifty"), (30, "thirty"), (70, "seventy"), (60, "sixty"), (80, "eighty")]:
        tree.insert(key, value)
    print(f"✅ Tree holds {len(tree)} keys")

    # SEARCH operation
    print("\n🔍 Searching...")
    print(f"search(60) -> {tree.search(60)}")
    print(f"search(65) -> {tree.search(65)}")

    # DELETE operation - node with two children
    print("\n🗑️ Deleting the root (two children)...")
    print(f"delete(50) -> {tree.delete(50)}")
    print(f"contains_key(50) -> {tree.contains_key(50)}")
    print(f"search(60) -> {tree.search(60)}")

    # DELETE on an empty tree
    print("\n🪹 Deleting from an empty tree...")
    empty = BinarySearchTree(natural_order)
    try:
        empty.delete(1)
    except KeyNotFoundError as e:
        print(f"Raised KeyNotFoundError: {e}")

    print(f"\n📊 {tree.get_stats()}")


def main():
    """Run the minimal demo."""
    minimal_demo()
    print("\n🎉 Demo completed successfully!")


if __name__ == "__main__":
    main()
