"""Tests for keyed priority queues."""

import random

import pytest

from aoc_solver.search.priority_queue import (
    HeapPriorityQueue, SortedListPriorityQueue, QueueEntry, create_priority_queue
)

QUEUE_KINDS = ['heap', 'sorted']


@pytest.fixture(params=QUEUE_KINDS)
def queue(request):
    """Empty queue of each implementation."""
    return create_priority_queue(request.param)


class TestQueueBasics:
    """Test insert/pop behaviour shared by both implementations."""

    def test_empty_queue(self, queue):
        """Test that a new queue is empty and pops None."""
        assert queue.is_empty()
        assert len(queue) == 0
        assert queue.pop_minimum() is None
        assert queue.explored_count() == 1

    def test_pop_order(self, queue):
        """Test entries come out lowest priority first."""
        queue.insert_or_update('b', 'item-b', 5)
        queue.insert_or_update('a', 'item-a', 1)
        queue.insert_or_update('c', 'item-c', 3)

        popped = [queue.pop_minimum() for _ in range(3)]
        assert [entry.key for entry in popped] == ['a', 'c', 'b']
        assert popped[0] == QueueEntry('a', 'item-a', 1)
        assert queue.is_empty()
        assert queue.pop_minimum() is None

    def test_ties_follow_insertion_order(self, queue):
        """Test equal priorities pop in insertion order."""
        for key in ['x', 'y', 'z']:
            queue.insert_or_update(key, key, 7)

        assert [queue.pop_minimum().key for _ in range(3)] == ['x', 'y', 'z']

    def test_better_priority_replaces(self, queue):
        """Test a strictly better priority replaces the queued entry."""
        assert queue.insert_or_update('k', 'old', 10)
        assert queue.insert_or_update('k', 'new', 4)

        assert len(queue) == 1
        assert queue.priority_of('k') == 4
        entry = queue.pop_minimum()
        assert entry.item == 'new'
        assert queue.pop_minimum() is None

    def test_equal_or_worse_priority_is_ignored(self, queue):
        """Test equal and worse priorities leave the queued entry alone."""
        queue.insert_or_update('k', 'first', 4)
        assert not queue.insert_or_update('k', 'equal', 4)
        assert not queue.insert_or_update('k', 'worse', 9)

        assert len(queue) == 1
        assert queue.pop_minimum().item == 'first'

    def test_key_distinct_from_item(self, queue):
        """Test structurally equal items under different keys are not merged."""
        queue.insert_or_update('left', (1, 1), 2)
        queue.insert_or_update('right', (1, 1), 1)

        assert len(queue) == 2
        assert queue.pop_minimum().key == 'right'
        assert queue.pop_minimum().key == 'left'

    def test_contains(self, queue):
        """Test membership follows open keys."""
        queue.insert_or_update('k', None, 1)
        assert 'k' in queue
        queue.pop_minimum()
        assert 'k' not in queue
        assert queue.priority_of('k') is None

    def test_reinsert_after_pop(self, queue):
        """Test a popped key can be inserted again at any priority."""
        queue.insert_or_update('k', 'a', 1)
        queue.pop_minimum()
        assert queue.insert_or_update('k', 'b', 50)
        assert queue.pop_minimum().item == 'b'

    def test_explored_count(self, queue):
        """Test explored_count counts every pop call."""
        queue.insert_or_update('a', None, 1)
        queue.insert_or_update('b', None, 2)
        queue.pop_minimum()
        queue.pop_minimum()
        queue.pop_minimum()
        assert queue.explored_count() == 3


class TestMonotonicRelaxation:
    """Randomized update sequences keep the minimum priority per key."""

    @pytest.mark.parametrize('kind', QUEUE_KINDS)
    @pytest.mark.parametrize('seed', range(5))
    def test_stored_priority_is_minimum(self, kind, seed):
        """Test stored priority equals min(old, new) after every update."""
        rng = random.Random(seed)
        queue = create_priority_queue(kind)
        expected = {}

        for _ in range(300):
            key = rng.randrange(20)
            priority = rng.randrange(100)
            queue.insert_or_update(key, (key, priority), priority)
            expected[key] = min(expected.get(key, priority), priority)
            assert queue.priority_of(key) == expected[key]

        assert len(queue) == len(expected)

        popped = []
        while not queue.is_empty():
            entry = queue.pop_minimum()
            assert entry.priority == expected[entry.key]
            assert entry.item == (entry.key, entry.priority)
            popped.append(entry.priority)

        assert popped == sorted(popped)
        assert len(popped) == len(expected)

    @pytest.mark.parametrize('seed', range(3))
    def test_implementations_agree(self, seed):
        """Test heap and sorted-list queues pop identical sequences."""
        rng = random.Random(seed)
        heap = HeapPriorityQueue()
        ordered = SortedListPriorityQueue()

        for step in range(200):
            if rng.random() < 0.3:
                assert heap.pop_minimum() == ordered.pop_minimum()
            else:
                key = rng.randrange(15)
                priority = rng.randrange(50)
                assert heap.insert_or_update(key, step, priority) == \
                    ordered.insert_or_update(key, step, priority)

        while not heap.is_empty():
            assert heap.pop_minimum() == ordered.pop_minimum()
        assert ordered.is_empty()


class TestFactory:
    """Test create_priority_queue."""

    def test_known_kinds(self):
        """Test factory returns the right classes."""
        assert isinstance(create_priority_queue('heap'), HeapPriorityQueue)
        assert isinstance(create_priority_queue('sorted'), SortedListPriorityQueue)

    def test_unknown_kind(self):
        """Test factory rejects unknown names."""
        with pytest.raises(ValueError, match="Unknown priority queue kind"):
            create_priority_queue('fibonacci')
