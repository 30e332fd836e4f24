"""
Configuration management using Pydantic Settings.

Run settings are loaded from config/menu.yaml; environment variables
(MENU_*) and a .env file override the YAML values.
"""

from pathlib import Path
from typing import Any, Optional
import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CONFIG_FILE = Path('config') / 'menu.yaml'


def _resolve_config_path(config_path: Optional[str]) -> Path:
    """
    Find the YAML config file.

    An explicit path must exist. Otherwise config/menu.yaml is looked up
    relative to the project root, then the current working directory.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found at {path}.")
        return path

    project_root = Path(__file__).parent.parent.parent  # src/menu_nutrition/config.py -> root
    path = project_root / DEFAULT_CONFIG_FILE

    if not path.exists():
        path = DEFAULT_CONFIG_FILE

    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found at {path}. "
            f"Ensure {DEFAULT_CONFIG_FILE} exists in project root."
        )
    return path


class MenuConfig(BaseSettings):
    """
    Settings for one conversion run.

    Attributes:
        input_path: .docx menu document to read
        output_path: Delimited text file to write
        delimiter: Single-character field separator of the output
        row_filter: Only rows whose header contains this text (case
            insensitive) are exported; empty exports every row
        max_workers: Worker processes used for parsing rows

    Example:
        >>> config = MenuConfig(config_path='config/menu.yaml')
        >>> config.delimiter
        ';'
        >>> MenuConfig(input_path='menu.docx', output_path='menu.csv').max_workers
        1
    """

    input_path: Path = Field(
        ...,
        description="Path of the .docx menu document"
    )

    output_path: Path = Field(
        ...,
        description="Path of the delimited output file"
    )

    delimiter: str = Field(
        default=';',
        min_length=1,
        max_length=1,
        description="Field separator of the output file"
    )

    row_filter: str = Field(
        default='',
        description="Case-insensitive substring a row header must contain"
    )

    max_workers: int = Field(
        default=1,
        ge=1,
        description="Number of processes used to parse rows"
    )

    config_path: Optional[Path] = Field(
        default=None,
        exclude=True,
        description="YAML file the settings were loaded from"
    )

    model_config = SettingsConfigDict(
        env_prefix='MENU_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: Any) -> Any:
        """
        Fill missing values from the YAML config file.

        Values already provided (init arguments, environment) take
        precedence. The file is not required when both paths are given
        directly and no config_path is passed.
        """
        if not isinstance(data, dict):
            return data

        config_path = data.get('config_path')

        if config_path is None and 'input_path' in data and 'output_path' in data:
            return data

        path = _resolve_config_path(config_path)
        with open(path, 'r', encoding='utf-8') as f:
            try:
                yaml_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Malformed config file {path}: {e}") from e

        if not isinstance(yaml_data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        merged = {**yaml_data, **data}
        merged['config_path'] = path
        return merged

    @field_validator('row_filter')
    @classmethod
    def strip_row_filter(cls, v: str) -> str:
        return v.strip()

    def accepts_row(self, header: str) -> bool:
        """Check a row header against row_filter."""
        if not self.row_filter:
            return True
        return self.row_filter.casefold() in header.casefold()


# Singleton pattern - loaded once, cached forever
_config: Optional[MenuConfig] = None


def get_config() -> MenuConfig:
    """
    Get global config instance (lazy-loaded singleton).

    Returns:
        Singleton MenuConfig loaded from config/menu.yaml

    Raises:
        FileNotFoundError: If the config file is missing
        pydantic.ValidationError: If the config file is malformed
    """
    global _config
    if _config is None:
        _config = MenuConfig()
    return _config


def load_config(config_path: Optional[str] = None, **overrides: Any) -> MenuConfig:
    """
    Load a fresh config from a specific YAML file.

    Args:
        config_path: YAML file to read (default location when None)
        **overrides: Field values taking precedence over the file
    """
    if config_path is None:
        config_path = str(_resolve_config_path(None))
    return MenuConfig(config_path=config_path, **overrides)
