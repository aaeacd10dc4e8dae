"""
Timeline Visualizer demo

Opens a window with a sample schedule and a playing playhead. Every few
seconds the schedule is updated so the incremental stitching can be seen.

    python -m timeline_visualizer [--no-playhead] [--log-level INFO]

TIMELINE_VISUALIZER_LOG_LEVEL may also be set in the environment or a .env
file in the working directory.
"""
import argparse
import os
import sys

from dotenv import load_dotenv
from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication, QMainWindow

from .core import TimelineCanvas, TimelineVisualizer
from .logging import TimelineLog as Log
from .settings import TimelineVisualizerOptions
from .types import TimelineObject

UPDATE_INTERVAL_MS = 4000


def sample_objects(offset: float = 0) -> list:
    """A small schedule over three layers; offset shifts the later clips."""
    return [
        TimelineObject(id="intro", layer="graphics", enable={"start": 0, "duration": 40}),
        TimelineObject(id="lower_third", layer="graphics", enable={"start": 60 + offset, "duration": 90}),
        TimelineObject(id="bed", layer="audio", enable={"while": 1}),
        TimelineObject(id="jingle", layer="audio", enable=[
            {"start": 20, "end": 35},
            {"start": 180 + offset, "end": 200 + offset},
        ]),
        TimelineObject(id="camera_1", layer="video", enable={"start": 0, "end": 120}),
        TimelineObject(id="camera_2", layer="video", enable={"start": 120, "end": 300 + offset}),
    ]


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Timeline visualizer demo window.")
    parser.add_argument("--no-playhead", action="store_true", help="Disable the playhead")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: TIMELINE_VISUALIZER_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    args = _parse_args(argv)

    level_name = args.log_level or os.getenv("TIMELINE_VISUALIZER_LOG_LEVEL", "INFO")
    Log.level = getattr(Log, level_name.upper(), Log.INFO)

    app = QApplication.instance() or QApplication(sys.argv[:1])

    window = QMainWindow()
    window.setWindowTitle("Timeline Visualizer")
    canvas = TimelineCanvas("timeline")
    window.setCentralWidget(canvas)
    window.resize(1000, 300)
    window.show()

    options = TimelineVisualizerOptions(draw_playhead=not args.no_playhead, step_size=0.5)
    visualizer = TimelineVisualizer("timeline", options)
    visualizer.hovered.connect(
        lambda hovered: Log.info(
            f"hover: {hovered.object.id} [{hovered.instance.start}, {hovered.instance.end})"
            if hovered else "hover: cleared"
        )
    )

    visualizer.set_timeline(sample_objects(), {"time": 0})
    if options.draw_playhead:
        visualizer.set_viewport({"play_playhead": True, "play_speed": 10})

    updates = {"count": 0}

    def push_update():
        updates["count"] += 1
        visualizer.update_timeline(sample_objects(offset=5 * updates["count"]))

    update_timer = QTimer()
    update_timer.setInterval(UPDATE_INTERVAL_MS)
    update_timer.timeout.connect(push_update)
    update_timer.start()

    try:
        return app.exec()
    finally:
        update_timer.stop()
        visualizer.cleanup()


if __name__ == "__main__":
    sys.exit(main())
