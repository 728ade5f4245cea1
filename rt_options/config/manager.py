"""
Options file manager.

Loads options files and validates every record, reporting invalid
profiles instead of stopping at the first one.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from rt_options.config.settings import load_options
from rt_options.options.record import Options

logger = logging.getLogger(__name__)


@dataclass
class LoadedOptions:
    """Container for loaded and validated Options.

    Attributes:
        options: One Options record per profile
        is_valid: Whether every record passed validation
        invalid_profiles: Zero-based indices of records that failed
    """
    options: List[Options]
    is_valid: bool
    invalid_profiles: List[int] = field(default_factory=list)


class OptionsManager:
    """Loads and validates Options files.

    Example:
        >>> manager = OptionsManager()
        >>> loaded = manager.load("options.yaml")
        >>> if not loaded.is_valid:
        ...     print(f"Invalid profiles: {loaded.invalid_profiles}")
    """

    def __init__(self, base_path: Optional[str] = None):
        """Initialize the options manager.

        Args:
            base_path: Base path for relative file references.
                      Defaults to current working directory.
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to base_path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return (self.base_path / p).resolve()

    def load(self, path: Union[str, Path]) -> LoadedOptions:
        """Load an options file and validate each record.

        Args:
            path: Options file path (JSON or YAML)

        Returns:
            LoadedOptions with the records and their validation status
        """
        resolved = self.resolve_path(path)
        logger.info(f"Loading options from {resolved}")
        loaded = load_options(resolved)
        records = loaded if isinstance(loaded, list) else [loaded]
        return self.validate(records)

    def validate(self, records: List[Options]) -> LoadedOptions:
        """Validate each record independently."""
        invalid_profiles = []
        for index, record in enumerate(records):
            if not record.is_valid():
                logger.warning(f"Options for profile {index} are invalid")
                invalid_profiles.append(index)

        return LoadedOptions(
            options=records,
            is_valid=not invalid_profiles,
            invalid_profiles=invalid_profiles,
        )
