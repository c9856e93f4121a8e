#!/usr/bin/env python3
"""
Logging Demo
============

Shows structured logging of tree lookups and evictions.
"""

from evictree import BinarySearchTree, MostRecentlyUsedCapPolicy, natural_order
from evictree.utils import get_logger, get_metrics_logger, initialize_logging


def main():
    initialize_logging(log_level="DEBUG", log_format="json")
    logger = get_logger("examples.logging_demo")

    tree = BinarySearchTree(
        natural_order,
        MostRecentlyUsedCapPolicy(2),
        metrics=get_metrics_logger()
    )

    logger.info("Filling a tree with capacity 2", extra={"component": "demo"})
    for key in ["x", "y", "z"]:
        tree.insert(key, key * 2)
    tree.search("z")
    tree.search("x")
    logger.info("Done", extra={"size": len(tree)})


if __name__ == "__main__":
    main()
