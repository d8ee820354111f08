"""
Show Presets - Pre-configured show settings
Lets users switch canvas size, launch cadence and burst sizes with a single flag
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field, asdict

from .color import Color, parse_color


# ============================================================================
# Show Configuration
# ============================================================================

@dataclass
class ShowConfig:
    """Settings for one fireworks show"""

    # Canvas
    width: int = 800
    height: int = 600
    background: Color = (0, 0, 0)

    # Host loop rate; physics is per tick and does not read it
    fps: int = 60

    # Automatic launches
    auto_launch: bool = True
    launch_interval: int = 60

    # Launch geometry
    spawn_margin: float = 100.0
    launch_height_offset: float = 50.0
    launch_speed_min: float = 8.0
    launch_speed_max: float = 12.0
    launch_drift: float = 1.0
    stroke_width: float = 3.0

    # Bursts: N rockets, N in [burst_min, burst_max], burst_stagger ticks apart
    burst_min: int = 5
    burst_max: int = 10
    burst_stagger: int = 12

    seed: Optional[int] = None

    # Preset metadata
    name: str = "custom"
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def validate(self) -> 'ShowConfig':
        """Raise ValueError for settings the show cannot run with"""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.launch_interval <= 0:
            raise ValueError(f"launch_interval must be positive, got {self.launch_interval}")
        if self.stroke_width <= 0:
            raise ValueError(f"stroke_width must be positive, got {self.stroke_width}")
        if self.spawn_margin < 0 or self.launch_drift < 0:
            raise ValueError("spawn_margin and launch_drift cannot be negative")
        if not 0 < self.launch_speed_min <= self.launch_speed_max:
            raise ValueError(
                f"Invalid launch speed range: {self.launch_speed_min}..{self.launch_speed_max}"
            )
        if not 0 < self.burst_min <= self.burst_max:
            raise ValueError(f"Invalid burst range: {self.burst_min}..{self.burst_max}")
        if self.burst_stagger < 0:
            raise ValueError(f"burst_stagger cannot be negative, got {self.burst_stagger}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization"""
        data = asdict(self)
        data['background'] = list(self.background)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShowConfig':
        """Create from dictionary, ignoring unknown keys"""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}

        if 'background' in filtered:
            filtered['background'] = parse_color(filtered['background'])
        if 'tags' in filtered:
            filtered['tags'] = list(filtered['tags'] or [])

        return cls(**filtered).validate()

    def with_overrides(self, **overrides) -> 'ShowConfig':
        """Copy with some fields replaced; None values are ignored"""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return ShowConfig.from_dict(data)


def load_config(path: Union[str, Path]) -> ShowConfig:
    """Load a single show configuration from a YAML file"""
    path = Path(path)
    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    data.setdefault('name', path.stem)
    return ShowConfig.from_dict(data)


def save_config(config: ShowConfig, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    return path


# ============================================================================
# Built-in Presets
# ============================================================================

BUILTIN_PRESETS: Dict[str, Dict[str, Any]] = {
    "classic": {
        "description": "One rocket a second on an 800x600 night sky",
        "tags": ["default"],
    },
    "finale": {
        "description": "Rapid launches and big bursts",
        "launch_interval": 15,
        "burst_min": 10,
        "burst_max": 16,
        "burst_stagger": 6,
        "tags": ["busy", "celebration"],
    },
    "calm": {
        "description": "A slow, sparse show",
        "launch_interval": 150,
        "burst_min": 2,
        "burst_max": 4,
        "burst_stagger": 30,
        "tags": ["quiet"],
    },
    "night_sky": {
        "description": "Wide canvas sized for a 1200x800 window",
        "width": 1200,
        "height": 800,
        "launch_interval": 40,
        "tags": ["wide"],
    },
}


# ============================================================================
# Preset Manager
# ============================================================================

class PresetManager:
    """
    Manages loading, saving, and looking up show presets.
    """

    def __init__(self, user_presets_dir: Optional[Path] = None):
        """
        Initialize preset manager.

        Args:
            user_presets_dir: Directory for user presets (default: ~/.fireworks/presets)
        """
        self.user_presets_dir = Path(user_presets_dir or Path.home() / '.fireworks' / 'presets')
        self.user_presets_dir.mkdir(parents=True, exist_ok=True)

        self._builtin: Dict[str, ShowConfig] = {}
        self._user: Dict[str, ShowConfig] = {}

        self._load_builtin_presets()
        self._load_user_presets()

    def _load_builtin_presets(self) -> None:
        for name, data in BUILTIN_PRESETS.items():
            self._builtin[name] = ShowConfig.from_dict({**data, 'name': name})

    def _load_user_presets(self) -> None:
        """Load user-defined presets from YAML files"""
        for yaml_file in sorted(self.user_presets_dir.glob('*.yaml')):
            try:
                with open(yaml_file, 'r') as f:
                    data = yaml.safe_load(f)

                if not isinstance(data, dict):
                    continue

                if 'presets' in data:
                    # Multiple presets in one file
                    presets = data['presets']
                    if not isinstance(presets, dict):
                        raise ValueError("'presets' must be a mapping of name to settings")
                    for name, preset_data in presets.items():
                        self._user[name] = ShowConfig.from_dict({**preset_data, 'name': name})
                else:
                    name = yaml_file.stem
                    self._user[name] = ShowConfig.from_dict({**data, 'name': name})
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                print(f"Warning: Could not load preset file {yaml_file}: {e}")

    def get(self, name: str) -> Optional[ShowConfig]:
        """
        Get a preset by name.
        User presets override built-in presets with same name.
        """
        return self._user.get(name) or self._builtin.get(name)

    def exists(self, name: str) -> bool:
        return name in self._user or name in self._builtin

    def is_builtin(self, name: str) -> bool:
        return name in self._builtin and name not in self._user

    def list_all(self) -> List[str]:
        return sorted(set(self._builtin) | set(self._user))

    def list_by_tag(self, tag: str) -> List[str]:
        matches = []
        for name, preset in {**self._builtin, **self._user}.items():
            if tag.lower() in [t.lower() for t in preset.tags]:
                matches.append(name)
        return sorted(matches)

    def save_preset(self, preset: ShowConfig, filename: Optional[str] = None) -> Path:
        """
        Save a user preset to YAML file.

        Returns:
            Path to saved file
        """
        filename = filename or f"{preset.name}.yaml"
        if not filename.endswith('.yaml'):
            filename += '.yaml'

        filepath = save_config(preset, self.user_presets_dir / filename)
        self._user[preset.name] = preset
        return filepath

    def delete_preset(self, name: str) -> bool:
        """
        Delete a user preset.

        Returns:
            True if deleted, False if not found or is builtin
        """
        if name not in self._user:
            return False

        for yaml_file in self.user_presets_dir.glob('*.yaml'):
            if yaml_file.stem == name:
                yaml_file.unlink()
                break

        del self._user[name]
        return True


_preset_manager: Optional[PresetManager] = None


def get_preset_manager() -> PresetManager:
    """Get the global preset manager instance"""
    global _preset_manager
    if _preset_manager is None:
        _preset_manager = PresetManager()
    return _preset_manager


def get_preset(name: str) -> Optional[ShowConfig]:
    return get_preset_manager().get(name)


def list_presets() -> List[str]:
    return get_preset_manager().list_all()
