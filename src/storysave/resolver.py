from __future__ import annotations

import logging
from typing import Optional

from .events.handlers import SavePointLoadedHandlers
from .narrative import SceneQuery

logger = logging.getLogger(__name__)


class ResumeResolver:
    """Maps a save point key to the place where narrative execution resumes.

    Resolution order for ``resolve(key)``:

    1. Every SavePointLoadedHandlers observer is notified with the key, even
       when no resumption target exists afterwards.
    2. The first descriptor in the scene with ``resume_on_load`` set and a
       matching key (case-insensitive) resumes at the command *after* it.

    Only one descriptor is expected to match a key; if several do, the first
    one enumerated wins. Descriptors are queried fresh on every call.
    """

    def __init__(self, scene_query: SceneQuery, handlers: Optional[SavePointLoadedHandlers] = None) -> None:
        self.scene_query = scene_query
        self.handlers = handlers if handlers is not None else SavePointLoadedHandlers()

    def resolve(self, save_point_key: str) -> bool:
        """Notify observers and resume at the matching save point command.

        Returns:
            True if execution was resumed, False if nothing in the scene matched.
        """
        self.handlers.notify(save_point_key)

        folded = save_point_key.casefold()
        for descriptor in self.scene_query():
            if descriptor.resume_on_load and descriptor.key.casefold() == folded:
                logger.info(
                    "Resuming save point '%s' at command %d",
                    save_point_key,
                    descriptor.command_index + 1,
                )
                descriptor.flowchart.execute_block(descriptor.block, descriptor.command_index + 1)
                return True

        logger.debug("No resumable save point command matches '%s'", save_point_key)
        return False

    def resolve_start(self) -> bool:
        """Start execution at the scene's start point, if it has one.

        Unlike ``resolve``, execution starts *at* the descriptor's command.
        """
        for descriptor in self.scene_query():
            if descriptor.is_start_point:
                logger.info("Starting scene at start point '%s'", descriptor.key)
                descriptor.flowchart.execute_block(descriptor.block, descriptor.command_index)
                return True

        logger.debug("Scene has no start point; nothing to execute")
        return False
