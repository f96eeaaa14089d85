"""
Verification configuration.

Loads YAML configuration files, validates them and applies environment
variable overrides (MAC_SEED, MAC_TESTS) so a failing seed can be replayed
without editing the file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from moore_mac.utils.int_defs import SignedFormat
from moore_mac.verify.shrink import DEFAULT_SHRINK_LIMIT


@dataclass
class VerificationConfig:
    """Settings for a verification run."""
    width: int = 9
    cycle_configs: List[int] = field(default_factory=lambda: [100, 1000])
    tests: int = 100
    rtl_tests: int = 10
    seed: Optional[int] = None
    max_shrinks: int = DEFAULT_SHRINK_LIMIT

    def __post_init__(self):
        # Raises ValueError on a bad width
        SignedFormat(self.width)
        if not self.cycle_configs:
            raise ValueError("cycle_configs must list at least one cycle count")
        for cycles in self.cycle_configs:
            if not isinstance(cycles, int) or cycles < 0:
                raise ValueError(f"Invalid cycle count: {cycles!r}")
        if self.tests < 1:
            raise ValueError(f"tests must be positive, got {self.tests}")
        if self.rtl_tests < 0:
            raise ValueError(f"rtl_tests must be non-negative, got {self.rtl_tests}")
        if self.max_shrinks < 0:
            raise ValueError(f"max_shrinks must be non-negative, got {self.max_shrinks}")

    @property
    def fmt(self) -> SignedFormat:
        return SignedFormat(self.width)


class ConfigLoader:
    """Loads and validates YAML configuration files."""

    KNOWN_FIELDS = ("width", "cycle_configs", "tests", "rtl_tests", "seed", "max_shrinks")

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> VerificationConfig:
        unknown = [key for key in data if key not in ConfigLoader.KNOWN_FIELDS]
        if unknown:
            raise ValueError(f"Unknown fields in config: {', '.join(sorted(unknown))}")
        return VerificationConfig(**data)

    @staticmethod
    def apply_env(config: VerificationConfig, environ=None) -> VerificationConfig:
        """Override seed and test count from MAC_SEED / MAC_TESTS if set."""
        environ = os.environ if environ is None else environ
        data = dict(config.__dict__)
        try:
            if environ.get("MAC_SEED"):
                data["seed"] = int(environ["MAC_SEED"])
            if environ.get("MAC_TESTS"):
                data["tests"] = int(environ["MAC_TESTS"])
        except ValueError as e:
            raise ValueError(f"Invalid environment override: {e}") from e
        return VerificationConfig(**data)

    @staticmethod
    def load_config(config_path) -> VerificationConfig:
        """Load and validate a configuration file.

        Args:
            config_path: Path to YAML config file

        Returns:
            VerificationConfig object

        Raises:
            FileNotFoundError: If config file not found
            ValueError: If config is invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)

        if not data:
            raise ValueError(f"Empty config file: {config_path}")
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping: {config_path}")

        section = data.get("verification", data)
        if not isinstance(section, dict):
            raise ValueError(f"Invalid verification section in {config_path}")

        return ConfigLoader.from_dict(section)
