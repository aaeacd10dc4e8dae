"""
Timeline Interfaces

Protocol definitions for timeline integration points.
These allow the visualizer to work with any schedule resolver.

Note: hover notifications are delivered via a Qt signal
(TimelineVisualizer.hovered) rather than a callback interface,
following Qt conventions.
"""

from typing import Protocol, List, Dict, Any, runtime_checkable

from .types import TimelineObject, ResolvedTimeline


@runtime_checkable
class ResolverInterface(Protocol):
    """
    Protocol for schedule resolvers.

    Implement this interface to connect your resolution engine to the
    visualizer. The visualizer calls it once per set_timeline() /
    update_timeline() call; exceptions are propagated to the caller.
    """

    def resolve_timeline(
        self,
        objects: List[TimelineObject],
        options: Dict[str, Any]
    ) -> ResolvedTimeline:
        """
        Resolve declarative objects into concrete instances.

        Args:
            objects: Objects to resolve
            options: Resolve options. options["time"] is the reference time
                     (the playhead time in incremental mode, else 0).

        Returns:
            Resolved timeline, with objects grouped by layer
        """
        ...
