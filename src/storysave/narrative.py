"""Interfaces to the narrative engine and the scene's save point commands.

The save subsystem never executes narrative content itself. It finds
SavePointDescriptors in the current scene and asks their Flowchart to start
executing a block at a command index.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List


class Flowchart(ABC):
    """Narrative execution capability owned by the engine."""

    @abstractmethod
    def execute_block(self, block: Any, command_index: int) -> None:
        """Start executing ``block`` at ``command_index``.

        Args:
            block: An opaque block handle belonging to this flowchart
            command_index: Index of the first command to run
        """
        raise NotImplementedError


@dataclass(frozen=True)
class SavePointDescriptor:
    """A save point command discovered in the loaded scene.

    Attributes:
        key: Save point key, matched case-insensitively against history keys.
        block: Opaque handle of the block containing the command.
        command_index: Position of the command inside its block.
        flowchart: Flowchart that owns the block.
        is_start_point: Marks the scene's default resumption location.
        resume_on_load: Whether loading a save with this key resumes here.
    """

    key: str
    block: Any
    command_index: int
    flowchart: Flowchart
    is_start_point: bool = False
    resume_on_load: bool = True


SceneQuery = Callable[[], Iterable[SavePointDescriptor]]


class SceneSavePoints:
    """In-memory SceneQuery that hosts repopulate whenever a scene loads."""

    def __init__(self, descriptors: Iterable[SavePointDescriptor] = ()) -> None:
        self._descriptors: List[SavePointDescriptor] = list(descriptors)

    def add(self, descriptor: SavePointDescriptor) -> None:
        self._descriptors.append(descriptor)

    def replace(self, descriptors: Iterable[SavePointDescriptor]) -> None:
        self._descriptors = list(descriptors)

    def clear(self) -> None:
        self._descriptors.clear()

    def __call__(self) -> Iterator[SavePointDescriptor]:
        return iter(list(self._descriptors))
