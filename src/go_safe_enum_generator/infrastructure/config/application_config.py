"""Configuration management for the enum generator."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUTHY_VALUES = ("true", "1", "yes", "on")


@dataclass
class Config:
    """Run configuration for the enum generator."""

    input_file: Optional[Path] = None
    output_file: Optional[Path] = None
    emit_yaml: bool = False
    verbose: bool = False
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        input_file_str = os.getenv("ENUM_INPUT_FILE", "")
        output_file_str = os.getenv("ENUM_OUTPUT_FILE", "")
        log_dir_str = os.getenv("LOG_DIR", "")

        return cls(
            input_file=Path(input_file_str) if input_file_str else None,
            output_file=Path(output_file_str) if output_file_str else None,
            emit_yaml=os.getenv("ENUM_YAML", "false").lower() in TRUTHY_VALUES,
            verbose=os.getenv("VERBOSE", "false").lower() in TRUTHY_VALUES,
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        input_file: Optional[Path] = None,
        output_file: Optional[Path] = None,
        emit_yaml: Optional[bool] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Flags are only applied when truthy so an unset command-line switch never
        clears a value enabled through the environment.

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if input_file is not None:
            config.input_file = input_file
        if output_file is not None:
            config.output_file = output_file
        if emit_yaml:
            config.emit_yaml = True
        if verbose:
            config.verbose = True
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.input_file is None:
            raise ValueError("No input file given (use --file or ENUM_INPUT_FILE)")

        if not self.input_file.exists():
            raise ValueError(f"Input file not found: {self.input_file}")

        if not self.input_file.is_file():
            raise ValueError(f"Not a file: {self.input_file}")

        if self.output_file is not None and self.output_file.is_dir():
            raise ValueError(f"Output path is a directory: {self.output_file}")
