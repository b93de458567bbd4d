import pytest

from skinrig.descriptors import (
    MAX_SRV_COUNT,
    DescriptorAllocator,
    DescriptorExhaustedError,
)


def test_default_limit_and_start_index():
    allocator = DescriptorAllocator()
    assert allocator.max_count == MAX_SRV_COUNT == 128
    assert allocator.index == 1


def test_allocate_returns_sequential_indices():
    allocator = DescriptorAllocator()
    first = allocator.allocate()
    second = allocator.allocate()
    assert first == 1
    assert second == first + 1
    assert allocator.index == second + 1


def test_exhaustion_raises():
    allocator = DescriptorAllocator(max_count=3)
    assert [allocator.allocate(), allocator.allocate()] == [1, 2]
    assert allocator.can_allocate() is False
    with pytest.raises(DescriptorExhaustedError):
        allocator.allocate()


def test_can_allocate_until_limit():
    allocator = DescriptorAllocator(max_count=4)
    results = []
    while allocator.can_allocate():
        results.append(allocator.allocate())
    assert results == [1, 2, 3]


def test_increment_index_skips_a_slot():
    allocator = DescriptorAllocator()
    allocator.increment_index()
    assert allocator.allocate() == 2


def test_increment_index_can_pass_limit():
    allocator = DescriptorAllocator(max_count=2)
    allocator.increment_index()
    allocator.increment_index()
    assert allocator.index == 3
    assert allocator.can_allocate() is False


def test_invalid_max_count():
    with pytest.raises(ValueError):
        DescriptorAllocator(max_count=0)