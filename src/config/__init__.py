"""Configuration management for the LGGC tools"""

from .yaml_config import (
    LGGCConfig,
    BuilderConfig,
    SweepConfig,
    Theorem1Config,
    ExportConfig,
    OutputConfig,
    LoggingConfig,
    create_example_config
)

__all__ = [
    'LGGCConfig',
    'BuilderConfig',
    'SweepConfig',
    'Theorem1Config',
    'ExportConfig',
    'OutputConfig',
    'LoggingConfig',
    'create_example_config'
]
