"""
Utility Functions Module

Provides essential utilities:
- File I/O (generated output, YAML/JSON configuration)
- Logging configuration
- Path management
"""

import sys
import json
import yaml
import logging
from pathlib import Path
from typing import Dict, Optional, Any, Union
from logging.handlers import RotatingFileHandler

logger = logging.getLogger(__name__)

EXTENSION_FORMATS = {
    '.json': 'json',
    '.csv': 'csv',
}


class FileHandler:
    """Handles file input/output operations"""

    @staticmethod
    def write_text(content: str, filepath: Union[str, Path]) -> Path:
        """
        Write generated text to a file

        Args:
            content: Text to write
            filepath: Output path

        Returns:
            Path written
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        try:
            filepath.write_text(content, encoding='utf-8')
            logger.info(f"File written successfully: {filepath}")
        except OSError as e:
            logger.error(f"Failed to write {filepath}: {e}")
            raise

        return filepath

    @staticmethod
    def read_config(filepath: Union[str, Path]) -> Dict[str, Any]:
        """
        Read configuration file (YAML or JSON)

        Args:
            filepath: Path to config file

        Returns:
            Configuration dictionary
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        extension = filepath.suffix.lower()

        with open(filepath, 'r') as f:
            if extension in ['.yaml', '.yml']:
                return yaml.safe_load(f) or {}
            elif extension == '.json':
                return json.load(f)
            else:
                raise ValueError(f"Unsupported config format: {extension}")


def infer_format(filepath: Union[str, Path], default: str = 'json') -> str:
    """Map an output file extension to a format label"""
    return EXTENSION_FORMATS.get(Path(filepath).suffix.lower(), default)


class LoggerConfig:
    """
    Logging configuration manager

    Sets up consistent logging across the application
    """

    @staticmethod
    def setup_logger(
        name: str = "mockgen",
        level: int = logging.INFO,
        log_file: Optional[Union[str, Path]] = None,
        log_to_console: bool = True,
        log_format: Optional[str] = None
    ) -> logging.Logger:
        """
        Setup and configure logger

        Args:
            name: Logger name
            level: Logging level
            log_file: Optional file path for file logging
            log_to_console: Whether to log to console
            log_format: Custom log format

        Returns:
            Configured logger
        """
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Remove existing handlers
        logger.handlers.clear()

        if log_format is None:
            log_format = (
                '%(asctime)s - %(name)s - %(levelname)s - '
                '%(filename)s:%(lineno)d - %(message)s'
            )

        formatter = logging.Formatter(log_format)

        if log_to_console:
            # stderr keeps generated output on stdout clean
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        return logger


class PathManager:
    """Utilities for output paths"""

    @staticmethod
    def ensure_dir(path: Union[str, Path]) -> Path:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def get_unique_filename(
        directory: Union[str, Path],
        base_name: str,
        extension: str
    ) -> Path:
        """
        Get unique filename by adding counter if needed

        Args:
            directory: Directory path
            base_name: Base filename
            extension: File extension

        Returns:
            Unique filepath
        """
        directory = Path(directory)
        extension = extension if extension.startswith('.') else f'.{extension}'

        filepath = directory / f"{base_name}{extension}"

        if not filepath.exists():
            return filepath

        counter = 1
        while True:
            filepath = directory / f"{base_name}_{counter}{extension}"
            if not filepath.exists():
                return filepath
            counter += 1


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Quick logging setup

    Args:
        level: Logging level (number or name such as "DEBUG")
        log_file: Optional log file path
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    return LoggerConfig.setup_logger(level=level, log_file=log_file)
