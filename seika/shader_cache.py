"""Registry of shader instances addressed by small recyclable integer ids."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from seika.shader import ShaderInstance

MAX_INSTANCES = 100
INVALID_ID = MAX_INSTANCES + 1


class ShaderCacheFullError(RuntimeError):
    """Raised when every shader instance id is already in use."""


class ShaderCache:
    """Holds references to custom shader instances under recycled ids.

    Free ids are handed out first-in, first-out: a removed id goes to the back
    of the queue and is reused only after every id freed before it.
    """

    def __init__(self) -> None:
        self._free_ids: deque[int] = deque(range(MAX_INSTANCES))
        self._instances: list[ShaderInstance | None] = [None] * MAX_INSTANCES

    def __len__(self) -> int:
        return MAX_INSTANCES - len(self._free_ids)

    def __contains__(self, instance_id: object) -> bool:
        return (
            isinstance(instance_id, int)
            and 0 <= instance_id < MAX_INSTANCES
            and self._instances[instance_id] is not None
        )

    def __iter__(self) -> Iterator[int]:
        return (i for i, instance in enumerate(self._instances) if instance is not None)

    @staticmethod
    def _check_range(instance_id: int) -> None:
        if not 0 <= instance_id < MAX_INSTANCES:
            raise ValueError(
                f"shader instance id {instance_id} is outside 0..{MAX_INSTANCES - 1}"
            )

    def add_instance(self, instance: ShaderInstance) -> int:
        """Store ``instance`` and return the id it was given."""
        if instance is None:
            raise ValueError("shader instance must not be None")
        if not self._free_ids:
            raise ShaderCacheFullError(
                f"all {MAX_INSTANCES} shader instance ids are in use"
            )
        new_id = self._free_ids.popleft()
        self._instances[new_id] = instance
        return new_id

    def remove_instance(self, instance_id: int) -> None:
        """Forget the instance under ``instance_id`` and make the id available again."""
        self._check_range(instance_id)
        if self._instances[instance_id] is None:
            raise ValueError(f"shader instance id {instance_id} is not in use")
        self._instances[instance_id] = None
        self._free_ids.append(instance_id)

    def get_instance(self, instance_id: int) -> ShaderInstance | None:
        """Return the instance under ``instance_id``, or None if the slot is empty."""
        self._check_range(instance_id)
        return self._instances[instance_id]

    def get_instance_checked(self, instance_id: int) -> ShaderInstance | None:
        """Like :meth:`get_instance`, but return None for :data:`INVALID_ID`."""
        if instance_id == INVALID_ID:
            return None
        return self.get_instance(instance_id)