"""Named slicing presets loaded from YAML.

Presets are looked up with priority resolution:
1. User config: ~/.config/{app_name}/presets.yaml (highest priority)
2. Project config: .{app_name}/presets.yaml in current directory
3. Package defaults: shipped with slice-text (fallback)

A preset defined in a higher-priority file replaces the whole preset of the
same name further down; presets it does not mention are still inherited.
"""

import logging
from pathlib import Path

from .matchers import SliceOptions

logger = logging.getLogger(__name__)

PRESETS_FILENAME = "presets.yaml"

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


def _get_package_defaults_path():
    """Get path to package default presets using importlib.resources."""
    try:
        from importlib.resources import files

        return files("slice_text.preset_data") / "_defaults"
    except (ImportError, TypeError):
        # Editable installs without package metadata
        return Path(__file__).parent / "preset_data" / "_defaults"


class PresetConfig:
    """Load slicing presets from config files with priority resolution.

    Users can override a shipped preset or add new ones by placing a
    ``presets.yaml`` with a top-level ``presets`` mapping in one of the
    config directories::

        presets:
          tags:
            escape: true
            boundary: start
            case_sensitive: false
    """

    def __init__(self, app_name: str = "slice-text"):
        """Initialize and load every preset file that exists.

        Args:
            app_name: Application name for config directory resolution.
                     Controls where user overrides are loaded from
                     (e.g., ~/.config/{app_name}/presets.yaml).
        """
        self._app_name = app_name
        self._config_locations = [
            Path.home() / ".config" / app_name,  # User overrides
            Path.cwd() / f".{app_name}",  # Project config
        ]

        self._raw: dict[str, dict] = {}
        self._presets: dict[str, SliceOptions] = {}
        self._load_all()

    def _load_all(self) -> None:
        """Load presets from lowest to highest priority so later files win."""
        self._load_file(_get_package_defaults_path() / PRESETS_FILENAME, required=True)
        for config_dir in reversed(self._config_locations):
            config_file = config_dir / PRESETS_FILENAME
            if config_file.is_file():
                self._load_file(config_file)

    def _load_file(self, config_file, required: bool = False) -> None:
        """Merge the ``presets`` block of one YAML file into the raw presets.

        Unreadable user and project files are logged and skipped. The
        package defaults are *required*, so errors there propagate.
        """
        yaml = _get_yaml()

        try:
            content = config_file.read_text(encoding="utf-8")
            data = yaml.safe_load(content)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            if required:
                raise
            logger.warning("Skipping malformed preset file %s: %s", config_file, exc)
            return

        if not data:
            return
        if not isinstance(data, dict):
            if required:
                raise ValueError(f"Preset file {config_file} must hold a mapping")
            logger.warning("Skipping preset file %s: top level is not a mapping", config_file)
            return

        presets = data.get("presets")
        if not isinstance(presets, dict):
            return

        for name, options in presets.items():
            if options is None:
                options = {}
            if not isinstance(options, dict):
                logger.warning(
                    "Skipping preset %r in %s: expected a mapping, got %s",
                    name,
                    config_file,
                    type(options).__name__,
                )
                continue
            self._raw[str(name)] = dict(options)

    def get(self, name: str) -> SliceOptions:
        """Return the options stored under preset *name*.

        Raises:
            ValueError: If no preset of that name exists or its options
                are invalid.
        """
        if name in self._presets:
            return self._presets[name]
        if name not in self._raw:
            available = ", ".join(self.names())
            raise ValueError(f"Unknown slicing preset {name!r}. Available presets: {available}")
        options = SliceOptions.from_mapping(self._raw[name])
        self._presets[name] = options
        return options

    def get_raw_presets(self) -> dict[str, dict]:
        """Get the unvalidated preset mappings.

        Returns:
            Dict mapping preset names to their option mappings.
        """
        return {name: dict(options) for name, options in self._raw.items()}

    def names(self) -> list[str]:
        """Return sorted preset names."""
        return sorted(self._raw)


def load_preset(name: str, app_name: str = "slice-text") -> SliceOptions:
    """Look up one preset, reading config files afresh."""
    return PresetConfig(app_name=app_name).get(name)


def list_presets(app_name: str = "slice-text") -> list[str]:
    """List every preset visible from the current user and directory."""
    return PresetConfig(app_name=app_name).names()
