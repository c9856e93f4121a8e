import pytest

from evictree.models.stats import TreeStats, create_tree_stats


def test_create_tree_stats_defaults():
    stats = create_tree_stats(size=0, policy="UnboundedPolicy")
    assert stats.capacity is None
    assert not stats.bounded
    assert stats.lookups == 0
    assert stats.hit_rate == 0.0

def test_hit_rate():
    stats = create_tree_stats(size=3, policy="MostRecentlyUsedCapPolicy", capacity=3, hits=3, misses=1)
    assert stats.lookups == 4
    assert stats.hit_rate == 0.75
    assert stats.bounded

def test_to_dict():
    stats = create_tree_stats(
        size=2, policy="MostFrequentlyUsedCapPolicy", capacity=2,
        tracked_keys=2, hits=1, misses=1, evictions=4
    )
    assert stats.to_dict() == {
        "size": 2,
        "policy": "MostFrequentlyUsedCapPolicy",
        "capacity": 2,
        "tracked_keys": 2,
        "hits": 1,
        "misses": 1,
        "hit_rate": 0.5,
        "evictions": 4
    }

def test_str():
    assert str(create_tree_stats(size=1, policy="UnboundedPolicy")) == (
        "TreeStats(size=1/unbounded, policy=UnboundedPolicy, hit_rate=0.0%, evictions=0)"
    )

def test_counters_cannot_be_negative():
    with pytest.raises(ValueError):
        TreeStats(size=-1, policy="UnboundedPolicy")
    with pytest.raises(ValueError):
        TreeStats(size=1, policy="UnboundedPolicy", evictions=-2)

def test_capacity_must_be_positive_int():
    with pytest.raises(ValueError):
        TreeStats(size=0, policy="MostRecentlyUsedCapPolicy", capacity=0)
    with pytest.raises(TypeError):
        TreeStats(size=0, policy="MostRecentlyUsedCapPolicy", capacity="3")

def test_stats_are_immutable():
    stats = create_tree_stats(size=1, policy="UnboundedPolicy")
    with pytest.raises(AttributeError):
        stats.size = 2
