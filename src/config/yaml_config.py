"""
YAML Configuration Manager for the LGGC tools
Provides centralized configuration loading and validation
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field, asdict

from largegap.builder import DEFAULT_MAX_WIDTH, DEFAULT_SEARCH_MAX_WIDTH, SEARCH_WIDTH_LIMIT
from largegap.code import MAX_CONTAINER_WIDTH
from largegap.errors import InvalidParameters
from largegap.formats import FORMATS
from largegap.theorem import ShapeParameters


@dataclass
class BuilderConfig:
    """Code builder limits"""
    max_width: int = DEFAULT_MAX_WIDTH
    search_max_width: int = DEFAULT_SEARCH_MAX_WIDTH

    @classmethod
    def from_dict(cls, d: dict) -> 'BuilderConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__annotations__})


@dataclass
class SweepConfig:
    """Width range of the statistics report"""
    min_width: int = 3
    max_width: int = 20

    @classmethod
    def from_dict(cls, d: dict) -> 'SweepConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__annotations__})


@dataclass
class Theorem1Config:
    """Theorem 1 codes to build, and extra widths to report after building them"""
    parameters: List[List[int]] = field(default_factory=list)
    widths: List[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> 'Theorem1Config':
        config = cls(**{k: v for k, v in d.items() if k in cls.__annotations__})
        config.parameters = [list(p) for p in config.parameters]
        return config


@dataclass
class ExportConfig:
    """One code written to a file"""
    width: int
    filename: str
    format: str = "vertical"

    @classmethod
    def from_dict(cls, d: dict) -> 'ExportConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__annotations__})


@dataclass
class OutputConfig:
    """What the demo prints and writes"""
    directory: str = "output"
    show_width: Optional[int] = 7
    show_format: str = "horizontal"
    exports: List[ExportConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> 'OutputConfig':
        config = cls(**{k: v for k, v in d.items() if k in cls.__annotations__})
        config.exports = [e if isinstance(e, ExportConfig) else ExportConfig.from_dict(e)
                          for e in config.exports]
        return config


@dataclass
class LoggingConfig:
    level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict) -> 'LoggingConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__annotations__})


class LGGCConfig:
    """Main configuration manager"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration

        Args:
            config_path: Path to YAML config file
        """
        self.config_path = config_path
        self.raw_config: Dict[str, Any] = {}

        self.builder = BuilderConfig()
        self.sweep = SweepConfig()
        self.theorem1 = Theorem1Config()
        self.output = OutputConfig()
        self.logging = LoggingConfig()

        if config_path:
            self.load(config_path)

    def load(self, config_path: str):
        """
        Load configuration from YAML file

        Args:
            config_path: Path to YAML file
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, 'r') as f:
            self.raw_config = yaml.safe_load(f) or {}

        if 'builder' in self.raw_config:
            self.builder = BuilderConfig.from_dict(self.raw_config['builder'])

        if 'sweep' in self.raw_config:
            self.sweep = SweepConfig.from_dict(self.raw_config['sweep'])

        if 'theorem1' in self.raw_config:
            self.theorem1 = Theorem1Config.from_dict(self.raw_config['theorem1'])

        if 'output' in self.raw_config:
            self.output = OutputConfig.from_dict(self.raw_config['output'])

        if 'logging' in self.raw_config:
            self.logging = LoggingConfig.from_dict(self.raw_config['logging'])

        self.config_path = config_path

    def to_dict(self) -> Dict[str, Any]:
        return {
            'builder': asdict(self.builder),
            'sweep': asdict(self.sweep),
            'theorem1': asdict(self.theorem1),
            'output': asdict(self.output),
            'logging': asdict(self.logging),
        }

    def save(self, output_path: Optional[str] = None):
        """
        Save configuration to YAML file

        Args:
            output_path: Path to save to (uses original path if not specified)
        """
        if output_path is None and self.config_path is None:
            raise ValueError("No output path specified")

        output_path = Path(output_path or self.config_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=None, sort_keys=False)

    def validate(self) -> List[str]:
        """
        Validate configuration

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        max_width = self.builder.max_width
        if not 1 <= max_width <= MAX_CONTAINER_WIDTH:
            errors.append(f"builder.max_width must lie in [1, {MAX_CONTAINER_WIDTH}], got {max_width}")
        if not 1 <= self.builder.search_max_width <= SEARCH_WIDTH_LIMIT:
            errors.append(f"builder.search_max_width must lie in [1, {SEARCH_WIDTH_LIMIT}], "
                          f"got {self.builder.search_max_width}")

        if not 1 <= self.sweep.min_width <= self.sweep.max_width <= max_width:
            errors.append(f"Sweep range [{self.sweep.min_width}, {self.sweep.max_width}] "
                          f"must lie inside [1, {max_width}]")

        for params in self.theorem1.parameters:
            if len(params) != 4:
                errors.append(f"Theorem 1 tuple needs four integers, got {params}")
                continue
            try:
                shape = ShapeParameters(*params)
            except InvalidParameters as e:
                errors.append(f"Theorem 1 tuple {params}: {e}")
                continue
            if shape.width > max_width:
                errors.append(f"Theorem 1 tuple {params} builds width {shape.width} > {max_width}")

        for width in self.theorem1.widths:
            if not 1 <= width <= max_width:
                errors.append(f"Report width {width} outside [1, {max_width}]")

        if self.output.show_width is not None and not 1 <= self.output.show_width <= max_width:
            errors.append(f"output.show_width {self.output.show_width} outside [1, {max_width}]")
        if self.output.show_format not in FORMATS:
            errors.append(f"Unknown output.show_format: {self.output.show_format}")
        for export in self.output.exports:
            if export.format not in FORMATS:
                errors.append(f"Unknown export format '{export.format}' for {export.filename}")
            if not 1 <= export.width <= max_width:
                errors.append(f"Export width {export.width} outside [1, {max_width}]")

        if str(self.logging.level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid logging level: {self.logging.level}")

        return errors

    def summary(self) -> str:
        """Get configuration summary"""
        tuples = ', '.join(str(tuple(p)) for p in self.theorem1.parameters) or 'none'
        return f"""
LGGC Configuration Summary
==========================
Builder: widths up to {self.builder.max_width}, search up to {self.builder.search_max_width}
Sweep: widths {self.sweep.min_width}-{self.sweep.max_width}
Theorem 1 codes: {tuples}
Exports: {len(self.output.exports)} file(s) in {self.output.directory}
Config file: {self.config_path}
"""


def create_example_config(output_path: str = "configs/example.yaml") -> LGGCConfig:
    """Create an example configuration file reproducing the classic demonstration"""
    config = LGGCConfig()

    config.sweep.min_width = 3
    config.sweep.max_width = 20

    config.theorem1.parameters = [
        [14, 2, 3, 1],
        [8, 8, 129, 127],
        [9, 7, 65, 63],
        [11, 5, 21, 11],
    ]
    config.theorem1.widths = [13]

    config.output.show_width = 7
    config.output.show_format = "horizontal"
    config.output.exports = [
        ExportConfig(16, "16bitcode.txt", "vertical"),
        ExportConfig(13, "13bitcode.txt", "vertical"),
        ExportConfig(13, "large_gap_gray_code_13bit.c", "c"),
    ]

    config.save(output_path)
    print(f"Example config saved to {output_path}")
    return config
