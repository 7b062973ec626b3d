"""Project configuration stored in ``.bazekitrc``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bazekit.errors import ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".bazekitrc"
DEFAULT_REGISTRY_URL = (
    "https://raw.githubusercontent.com/mahi160/bazekit-cli/refs/heads/main/registry/registry.json"
)


def config_path(cwd: Optional[Path] = None) -> Path:
    return (cwd or Path.cwd()) / CONFIG_FILENAME


class BazekitConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    # Component root, relative to the project directory
    root: str = "src/components"
    # Main entry file name
    main: str = "main.ts"
    # Subfolder inside root that receives added components
    base_subfolder: str = Field(default="base", alias="baseSubfolder")
    registry_url: str = Field(default=DEFAULT_REGISTRY_URL, alias="registryUrl")

    @classmethod
    def load(cls, cwd: Optional[Path] = None) -> "BazekitConfig":
        """Load config from ``.bazekitrc``, or return defaults if it is absent.

        Field types are not validated here; values are passed through as
        written and only the registry URL is backfilled.
        """
        path = config_path(cwd)
        if not path.exists():
            logger.debug("No %s found, using defaults", CONFIG_FILENAME)
            return cls()
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"Failed to parse {CONFIG_FILENAME}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Failed to parse {CONFIG_FILENAME}: expected a JSON object"
            )
        if not data.get("registryUrl"):
            data["registryUrl"] = DEFAULT_REGISTRY_URL
        return cls.model_construct(**data)

    def save(self, cwd: Optional[Path] = None) -> Path:
        """Write config as pretty-printed JSON and return the path written."""
        path = config_path(cwd)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(by_alias=True), f, indent=2)
        logger.debug("Saved configuration to %s", path)
        return path

    def components_dir(self, cwd: Optional[Path] = None) -> Path:
        """Destination root for added components: root joined with base subfolder."""
        return (cwd or Path.cwd()) / self.root / self.base_subfolder
