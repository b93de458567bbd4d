"""Sequential allocation of shader-resource-view descriptor slots."""

from __future__ import annotations

MAX_SRV_COUNT = 128
FIRST_INDEX = 1


class DescriptorExhaustedError(RuntimeError):
    """Raised when every descriptor slot has been handed out."""


class DescriptorAllocator:
    """Hands out descriptor indices in order, starting at 1; slot 0 is reserved."""

    def __init__(self, max_count: int = MAX_SRV_COUNT) -> None:
        if max_count <= 0:
            raise ValueError("max_count must be positive")
        self.max_count = max_count
        self._use_index = FIRST_INDEX

    @property
    def index(self) -> int:
        """The index the next allocation will return."""
        return self._use_index

    def can_allocate(self) -> bool:
        """True while a slot is still free."""
        return self._use_index < self.max_count

    def allocate(self) -> int:
        """Return the next free index and advance past it."""
        if not self.can_allocate():
            raise DescriptorExhaustedError(
                f"all {self.max_count} descriptor slots are in use"
            )
        index = self._use_index
        self._use_index += 1
        return index

    def increment_index(self) -> None:
        """Skip the current index without checking the limit."""
        self._use_index += 1