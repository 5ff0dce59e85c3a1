"""
Mock Data Generator Package

Generates fake structured records (users) on request and renders them
as JSON or CSV for testing and demos.
"""

__version__ = "1.0.0"
__author__ = "Mock Data Team"

from .config import Config, ConfigLoader, ConfigValidator, get_default_config
from .exceptions import MockDataError, UnsupportedTypeError
from .formatters import OutputFormatter, format_output
from .generators import MockDataGenerator, UserGenerator
from .models import (
    MockDataRequest,
    MockDataTemplate,
    GenerationRule,
    DatasetMetrics,
    User,
    UserProfile,
    Address,
)
from .orchestrator import (
    DataOrchestrator,
    GenerationResult,
    generate_mock_data,
    mock_data,
    get_dataset_metrics,
)

__all__ = [
    "Config",
    "ConfigLoader",
    "ConfigValidator",
    "get_default_config",
    "MockDataError",
    "UnsupportedTypeError",
    "OutputFormatter",
    "format_output",
    "MockDataGenerator",
    "UserGenerator",
    "MockDataRequest",
    "MockDataTemplate",
    "GenerationRule",
    "DatasetMetrics",
    "User",
    "UserProfile",
    "Address",
    "DataOrchestrator",
    "GenerationResult",
    "generate_mock_data",
    "mock_data",
    "get_dataset_metrics",
]
