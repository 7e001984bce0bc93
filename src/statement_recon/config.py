"""Configuration loader and validation for statement conversion settings."""

from pathlib import Path
from typing import Any, Literal, Optional
import logging

import yaml
from pydantic import BaseModel, Field, ValidationError

from .utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CSV_HEADERS = ["Type", "Trans Date", "Post Date", "Description", "Amount"]


class ExtractionConfig(BaseModel):
    """Patterns used to recognise statement lines."""

    # Capture groups: month, day, description, amount
    transaction_pattern: str = r"^(\d{1,2})/(\d{1,2}) (.*) ([0-9\-\.,]+)"
    previous_balance_pattern: str = r"^Previous Balance \$([0-9\-\.,]+)"
    new_balance_pattern: str = r"^New Balance \$([0-9\-\.,]+)"
    year_pattern: str = r"^(\d{4}) Totals Year-to-Date"
    region_end_marker: str = "Amount Rewards"


class PdfToTextConfig(BaseModel):
    """Configuration for the external text extraction utility."""

    command: str = "pdftotext"
    arguments: list[str] = Field(default_factory=lambda: ["-raw", "-nopgbrk"])
    encoding: str = "utf-8"


class OutputConfig(BaseModel):
    """Configuration for exported transactions."""

    format: Literal["csv", "xlsx"] = "csv"
    delimiter: str = ","
    date_format: str = "%m/%d/%Y"
    sheet_name: str = "Transactions"
    headers: list[str] = Field(default_factory=lambda: list(CSV_HEADERS))


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    # Optional rotating log file alongside the stderr output
    file: Optional[str] = None


class ReconConfig(BaseModel):
    """Main configuration model for statement conversion."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    pdftotext: PdfToTextConfig = Field(default_factory=PdfToTextConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    config_file_path: Optional[str] = None


def get_default_config() -> dict[str, Any]:
    """Return the default configuration as a dictionary."""
    return ReconConfig().model_dump(exclude={"config_file_path"})


def load_config(config_path: Optional[Path] = None) -> ReconConfig:
    """
    Load configuration from a YAML file or use defaults.

    Args:
        config_path: Path to YAML configuration file (optional)

    Returns:
        ReconConfig object with loaded or default settings

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation
    """
    config_dict = get_default_config()

    if config_path and config_path.exists():
        logger.info(f"Loading configuration from: {config_path}")
        try:
            with open(config_path, "r") as f:
                user_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")

        # Deep merge user config into defaults
        config_dict = _deep_merge(config_dict, user_config)
        config_dict["config_file_path"] = str(config_path)
    else:
        logger.debug("Using default configuration")

    try:
        return ReconConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary to merge on top

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def generate_default_config(output_path: Path) -> None:
    """
    Generate a default configuration file.

    Args:
        output_path: Path to write the configuration file
    """
    config_dict = get_default_config()

    yaml_content = """# Credit-card statement conversion configuration
# Generated configuration file - customize as needed
# transaction_pattern captures, in order: month, day, description, amount

"""
    yaml_content += yaml.dump(config_dict, default_flow_style=False, sort_keys=False)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(yaml_content)

    logger.info(f"Generated configuration file: {output_path}")
