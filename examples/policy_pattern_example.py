"""
Policy Pattern Example
======================

Demonstrates the eviction policies a tree can be built with.
"""

from evictree import (
    BinarySearchTree,
    MostFrequentlyUsedCapPolicy,
    MostRecentlyUsedCapPolicy,
    TreeConfig,
    UnboundedPolicy,
    create_tree,
    natural_order
)

def demonstrate_policy_pattern():
    """Demonstrate different eviction policies."""

    print("=== Eviction Policy Pattern Demo ===\n")

    # 1. Unbounded policy (default)
    print("1. Unbounded Policy:")
    tree = BinarySearchTree(natural_order, UnboundedPolicy())
    for i in range(7):
        tree.insert(f"key_{i}", f"value_{i}")
    print(f"   Tree size: {len(tree)}")
    print(f"   Evicted count: {tree.policy.evicted_count}")
    print()

    # 2. Recency cap
    print("2. Most Recently Used Cap (capacity=3):")
    mru_policy = MostRecentlyUsedCapPolicy(3)
    tree = BinarySearchTree(natural_order, mru_policy)
    for key in ["a", "b", "c"]:
        tree.insert(key, key.upper())
    tree.search("a")
    evicted = tree.insert("d", "D")
    print(f"   Evicted after inserting 'd': {evicted}")
    print(f"   Recency order: {mru_policy.tracked_keys()}")
    print()

    # 3. Frequency cap
    print("3. Most Frequently Used Cap (capacity=2):")
    mfu_policy = MostFrequentlyUsedCapPolicy(2)
    tree = BinarySearchTree(natural_order, mfu_policy)
    tree.insert("A", 1)
    tree.insert("B", 2)
    tree.insert("A", 1)
    evicted = tree.insert("C", 3)
    print(f"   Evicted after inserting 'C': {evicted}")
    print(f"   Usage counts: {dict((k, mfu_policy.usage_count(k)) for k in mfu_policy.tracked_keys())}")
    print()

    # 4. From configuration
    print("4. From TreeConfig:")
    tree = create_tree(natural_order, TreeConfig(policy="mru_cap", capacity=2))
    for i in range(5):
        tree.insert(i, i * i)
    print(f"   {tree.get_stats()}")

if __name__ == "__main__":
    demonstrate_policy_pattern()
