"""
Scale catalog - discovers and loads known-scale bundles.

Bundles can come from:
1. Built-in library (shipped with package)
2. Project scales (a user directory of YAML files)

The catalog answers "which known scale is this?" for Scale values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from resonata.core.scale import Scale
from resonata.models.scale import ScaleDefinition, ScaleMetadata, normalize_name

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_PATH = Path(__file__).parent / "library"


@dataclass(frozen=True)
class ScaleMatch:
    """
    A scale recognised by the catalog.

    `family` is the definition the scale belongs to and `mode` the left
    rotation of the family that produces it. `name` is the mode name when
    the rotation is named, else the family name.
    """

    name: str
    family: str
    mode: int = 0


class ScaleCatalog:
    """
    Discovers and loads scale definitions.

    Definitions are loaded from YAML files in the library and project
    directories. Project definitions override library ones with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or DEFAULT_LIBRARY_PATH
        self.project_path = project_path
        self._definitions: dict[str, ScaleDefinition] | None = None

    def reload(self) -> None:
        """Forget cached definitions; the next lookup re-reads the files."""
        self._definitions = None

    def list_scales(self) -> list[ScaleMetadata]:
        """List all available scale families, sorted by name."""
        return [
            ScaleMetadata.from_definition(definition)
            for _, definition in sorted(self._load_all().items())
        ]

    def get_definition(self, name: str) -> ScaleDefinition | None:
        """Get a scale family by name."""
        return self._load_all().get(normalize_name(name))

    def get_scale(self, name: str) -> Scale | None:
        """
        Get a scale by family or mode name.

        Returns:
            Scale if found, None otherwise
        """
        name = normalize_name(name)
        definitions = self._load_all()

        if name in definitions:
            return definitions[name].to_scale()

        for definition in definitions.values():
            if name in definition.modes:
                return definition.mode(definition.modes.index(name))

        return None

    def identify(self, scale: Scale) -> ScaleMatch | None:
        """
        Name a scale that is exactly a known family or named mode.

        Returns:
            ScaleMatch if the scale has a name, None otherwise
        """
        for family, definition in self._load_all().items():
            for index, rotation in enumerate(definition.to_scale().rotations()):
                name = definition.mode_name(index)
                if name is not None and rotation == scale:
                    return ScaleMatch(name, family, index)
        return None

    def find_parent(self, scale: Scale) -> ScaleMatch | None:
        """
        Find the family the scale is a rotation of, named or not.

        Returns:
            ScaleMatch with the rotation index, None if no family matches
        """
        for family, definition in self._load_all().items():
            for index, rotation in enumerate(definition.to_scale().rotations()):
                if rotation == scale:
                    return ScaleMatch(definition.mode_name(index) or family, family, index)
        return None

    def is_known(self, scale: Scale) -> bool:
        """True if the scale is a known family or named mode."""
        return self.identify(scale) is not None

    def _load_all(self) -> dict[str, ScaleDefinition]:
        if self._definitions is not None:
            return self._definitions

        definitions: dict[str, ScaleDefinition] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                definition = self._load_scale_file(path)
                if definition is not None:
                    definitions[definition.name] = definition

        logger.debug("Loaded %d scale definitions", len(definitions))
        self._definitions = definitions
        return definitions

    def _load_scale_file(self, path: Path) -> ScaleDefinition | None:
        """Load a definition from a YAML file, skipping unreadable bundles."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return ScaleDefinition.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError):
            logger.warning("Skipping invalid scale bundle %s", path, exc_info=True)
            return None
