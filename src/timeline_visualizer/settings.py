"""
Timeline Visualizer Options

Dataclass schema for visualizer configuration, with defaults taken from
constants.py.

Usage:
    options = TimelineVisualizerOptions(draw_playhead=True)

    # Or from a plain dict (camelCase drawPlayhead accepted)
    options = TimelineVisualizerOptions.from_dict({"drawPlayhead": True})

    result = options.validate()
    if not result:
        for error in result.errors:
            print(error)
"""
from dataclasses import dataclass, field, fields, asdict
from typing import Dict, Any, List, Optional

from .constants import (
    DEFAULT_STEP_SIZE, DEFAULT_DRAW_RANGE, LABEL_WIDTH_OF_TIMELINE,
    MAX_LAYER_HEIGHT, TIMELINE_OBJECT_HEIGHT, ZOOM_FACTOR, PAN_FACTOR,
    DEFAULT_PLAYHEAD_SPEED, PLAYHEAD_UPDATE_INTERVAL_MS,
)
from .errors import InvalidOptionsError
from .logging import TimelineLog as Log


@dataclass
class ValidationResult:
    """
    Result of validating options.

    Attributes:
        valid: True if all validations passed
        errors: List of error messages (validation failures)
        warnings: List of warning messages (non-blocking issues)
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str):
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class TimelineVisualizerOptions:
    """
    Visualizer configuration.

    Attributes:
        draw_playhead: Enable the playhead (time tracking, playback and the
                       playhead fields of set_viewport())
        step_size: Time step, scales the default draw range and panning
        draw_range: Visible time range at zoom 100, before step_size
        label_width_ratio: Proportion of the canvas used for layer labels
        max_layer_height: Upper bound of a row's height in pixels
        object_height_ratio: Object height as a proportion of row height
        zoom_factor: Zoom multiplier per wheel delta unit
        pan_factor: Pan multiplier per wheel delta unit
        playhead_speed: Initial playback speed (time units per second)
        frame_interval_ms: Frame loop interval
    """
    draw_playhead: bool = False
    step_size: float = DEFAULT_STEP_SIZE
    draw_range: float = DEFAULT_DRAW_RANGE
    label_width_ratio: float = LABEL_WIDTH_OF_TIMELINE
    max_layer_height: float = MAX_LAYER_HEIGHT
    object_height_ratio: float = TIMELINE_OBJECT_HEIGHT
    zoom_factor: float = ZOOM_FACTOR
    pan_factor: float = PAN_FACTOR
    playhead_speed: float = DEFAULT_PLAYHEAD_SPEED
    frame_interval_ms: int = PLAYHEAD_UPDATE_INTERVAL_MS

    _ALIASES = {
        'drawPlayhead': 'draw_playhead',
        'stepSize': 'step_size',
    }

    @property
    def default_draw_range(self) -> float:
        """Time range shown at zoom 100."""
        return self.draw_range * self.step_size

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        if self.step_size <= 0:
            result.add_error(f"step_size must be positive, got {self.step_size}")
        if self.draw_range <= 0:
            result.add_error(f"draw_range must be positive, got {self.draw_range}")
        if not 0 <= self.label_width_ratio < 1:
            result.add_error(
                f"label_width_ratio must be in [0, 1), got {self.label_width_ratio}"
            )
        if self.max_layer_height <= 0:
            result.add_error(f"max_layer_height must be positive, got {self.max_layer_height}")
        if not 0 < self.object_height_ratio <= 1:
            result.add_error(
                f"object_height_ratio must be in (0, 1], got {self.object_height_ratio}"
            )
        if self.zoom_factor <= 1:
            result.add_error(f"zoom_factor must be greater than 1, got {self.zoom_factor}")
        if self.frame_interval_ms <= 0:
            result.add_error(f"frame_interval_ms must be positive, got {self.frame_interval_ms}")
        if self.playhead_speed < 0:
            result.add_warning(f"playhead_speed is negative ({self.playhead_speed})")
        return result

    def ensure_valid(self) -> 'TimelineVisualizerOptions':
        """Raise InvalidOptionsError unless the options validate."""
        result = self.validate()
        for warning in result.warnings:
            Log.warning(f"TimelineVisualizerOptions: {warning}")
        if not result:
            raise InvalidOptionsError(result.errors)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'TimelineVisualizerOptions':
        """
        Create from dictionary.

        Unknown keys are ignored (logged at debug level) so that option
        dicts written for newer versions still load.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (data or {}).items():
            name = cls._ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                Log.debug(f"TimelineVisualizerOptions: ignoring unknown option '{key}'")
        return cls(**kwargs)
