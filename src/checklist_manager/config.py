"""
Module: checklist_manager.config

Purpose:
    Configuration dataclass for the checklist slot manager. Immutable
    configuration with validation on construction.

Key Classes:
    - ManagerConfig: Slot count and serialization settings

Used By:
    - core.manager: ChecklistSlotManager
    - gui.main_window: number of input panels / output cards
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_SLOT_COUNT = 3
DEFAULT_INDENT = 2


@dataclass(frozen=True)
class ManagerConfig:
    """
    Configuration for a checklist session (immutable).

    Attributes:
        slot_count: Number of independent checklist slots
        indent: Indentation used when regenerating slot text after a toggle

    Example:
        >>> config = ManagerConfig()
        >>> config.slot_count
        3
    """

    slot_count: int = DEFAULT_SLOT_COUNT
    indent: int = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if self.slot_count < 1:
            raise ValueError(f"slot_count must be >= 1, got {self.slot_count}")
        if self.indent < 0:
            raise ValueError(f"indent cannot be negative: {self.indent}")
