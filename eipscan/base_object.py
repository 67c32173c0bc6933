"""Common base of the CIP object interfaces."""

from __future__ import annotations


class BaseObject:
    """A CIP object instance addressed by its class and instance IDs."""

    __slots__ = ("_class_id", "_instance_id")

    def __init__(self, class_id: int, instance_id: int) -> None:
        for name, value in (("class_id", class_id), ("instance_id", instance_id)):
            if not 0 <= int(value) <= 0xFFFF:
                raise ValueError(f"{name} must fit in 16 bits, got {value}")
        self._class_id = int(class_id)
        self._instance_id = int(instance_id)

    @property
    def class_id(self) -> int:
        """The class ID of the instance."""
        return self._class_id

    @property
    def instance_id(self) -> int:
        """The instance ID of the instance."""
        return self._instance_id

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(class_id={self._class_id}, "
            f"instance_id={self._instance_id})"
        )