"""
Settings Management
Engine defaults and optional JSON-backed overrides
"""
import copy
import json
import logging
import os
from typing import Dict, Any

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PDF_ENGINE_CONFIG"


class Settings:
    """Manages engine settings

    Settings are in-memory unless a config file is given (directly or via the
    PDF_ENGINE_CONFIG environment variable); then they are loaded from and
    saved to that JSON file.
    """

    def __init__(self, config_file: str = None):
        if config_file is None:
            config_file = os.environ.get(CONFIG_ENV_VAR) or None

        self.config_file = config_file
        self.settings = self.load()

    def load(self) -> Dict[str, Any]:
        """Load settings from file, layered over the defaults"""
        settings = self.get_defaults()
        if self.config_file and os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    _merge(settings, json.load(f))
            except (OSError, ValueError) as e:
                logger.warning(f"Error loading settings from {self.config_file}: {e}")
        return settings

    def save(self):
        """Save settings to file (no-op for in-memory settings)"""
        if not self.config_file:
            return
        try:
            directory = os.path.dirname(self.config_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=4)
        except OSError as e:
            logger.warning(f"Error saving settings to {self.config_file}: {e}")

    def get_defaults(self) -> Dict[str, Any]:
        """Get default settings"""
        return {
            'page': {
                'default_width': 612,
                'default_height': 792,
            },
            'text': {
                'font_size': 12,
            },
            'highlighter': {
                'opacity': 0.4,
            },
            'sticky_note': {
                'size': 20,
                'color': '#FFFF00',
                'bubble_width': 160,
                'bubble_font_size': 8,
                'preview_length': 50,
            },
            'link': {
                'color': '#2563EB',
                'opacity': 0.2,
            },
            'watermark': {
                'margin': 50,
                'image_scale': 0.5,
            },
            'history': {
                'max_entries': 50,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value using a dotted key ('page.default_width')"""
        keys = key.split('.')
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set a setting value"""
        keys = key.split('.')
        current = self.settings

        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value
        self.save()

    def get_all(self) -> Dict[str, Any]:
        """Get all settings"""
        return copy.deepcopy(self.settings)

    def reset_to_defaults(self):
        """Reset all settings to defaults"""
        self.settings = self.get_defaults()
        self.save()


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]):
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
