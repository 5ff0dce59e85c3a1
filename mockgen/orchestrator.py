"""
Data Generation Orchestrator Module

Drives a generation request end to end: checks the requested kind,
builds the records, and renders them in the requested format.

Public entry points:
- generate_mock_data: request -> formatted text
- mock_data: same, with failures wrapped in MockDataError
- get_dataset_metrics: default metrics payload as JSON
"""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
import logging

from .config import Config, get_default_config
from .exceptions import MockDataError, UnsupportedTypeError
from .formatters import format_output, normalize_format
from .generators import GENERATOR_REGISTRY, MockDataGenerator, RandomSource
from .generators.registry import GeneratorFactory
from .models import DatasetMetrics, MockDataRequest

logger = logging.getLogger(__name__)

RequestLike = Union[MockDataRequest, Dict[str, Any]]


@dataclass
class GenerationResult:
    """Result of one generation request"""
    records: List[Any]
    output: str
    format: str
    generation_time: float
    metadata: Dict[str, Any] = field(default_factory=dict)


def _coerce_request(request: RequestLike) -> MockDataRequest:
    if isinstance(request, MockDataRequest):
        return request
    return MockDataRequest.from_dict(request)


class DataOrchestrator:
    """
    Main orchestrator for mock data generation

    Each call to ``generate`` builds its own ``MockDataGenerator`` and
    record list; nothing is shared between requests.
    """

    def __init__(self, config: Optional[Config] = None, rng: Optional[RandomSource] = None):
        """
        Initialize the orchestrator

        Args:
            config: Configuration object (uses default if None)
            rng: Random source handed to every generator (fresh per request if None)
        """
        self.config = config or get_default_config()
        self.rng = rng
        self.generators: Dict[str, GeneratorFactory] = dict(GENERATOR_REGISTRY)

        logger.debug("DataOrchestrator initialized")

    def register_generator(self, entity_type: str, factory: GeneratorFactory):
        """
        Register a generator for this orchestrator only

        Args:
            entity_type: Kind name
            factory: Callable taking ``(rng, locale)`` and returning a generator
        """
        self.generators[entity_type.lower()] = factory
        logger.info(f"Registered generator: {entity_type.lower()}")

    def check_type(self, entity_type: str):
        """Raise ``UnsupportedTypeError`` unless a generator exists for the kind"""
        if entity_type.lower() not in self.generators:
            raise UnsupportedTypeError(entity_type)

    def build_records(self, request: MockDataRequest) -> List[Any]:
        """
        Build ``request.count`` records of ``request.type``

        Args:
            request: Generation request

        Returns:
            Ordered list of records
        """
        self.check_type(request.type)

        if request.template is not None:
            logger.debug(f"Template '{request.template.name}' supplied; templates are not applied")

        generator = MockDataGenerator(
            seed=request.seed,
            locale=request.locale,
            rng=self.rng,
            registry=self.generators,
        )

        return [generator.generate(request.type) for _ in range(max(request.count, 0))]

    def generate(self, request: RequestLike) -> GenerationResult:
        """
        Generate and format records for a request

        Args:
            request: MockDataRequest or its wire-form dictionary

        Returns:
            GenerationResult with the records and the formatted output
        """
        request = _coerce_request(request)
        start_time = time.time()

        records = self.build_records(request)
        output = format_output(records, request.format, pretty=self.config.output.pretty)

        generation_time = time.time() - start_time
        logger.info(
            f"Generated {len(records)} {request.type.lower()} records "
            f"as {normalize_format(request.format)} in {generation_time:.3f}s"
        )

        return GenerationResult(
            records=records,
            output=output,
            format=normalize_format(request.format),
            generation_time=generation_time,
            metadata={
                'entity_type': request.type.lower(),
                'count': len(records),
                'seed': request.seed,
                'locale': request.locale,
            },
        )


def generate_mock_data(request: RequestLike, rng: Optional[RandomSource] = None) -> str:
    """
    Generate mock records and return them formatted

    Args:
        request: MockDataRequest or its wire-form dictionary
        rng: Optional random source

    Returns:
        Formatted text (JSON array or CSV)

    Raises:
        UnsupportedTypeError: If the requested kind is not supported
    """
    return DataOrchestrator(rng=rng).generate(request).output


def mock_data(request: RequestLike, rng: Optional[RandomSource] = None) -> str:
    """
    Same as ``generate_mock_data`` with failures wrapped in ``MockDataError``

    Raises:
        MockDataError: ``"Failed to generate mock data: <reason>"``
    """
    try:
        return generate_mock_data(request, rng=rng)
    except Exception as e:
        logger.error(f"Mock data generation failed: {e}")
        raise MockDataError(f"Failed to generate mock data: {e}") from e


def get_dataset_metrics(entity_type: str) -> str:
    """Dataset metrics for ``entity_type``; always the default payload"""
    return json.dumps(DatasetMetrics().to_dict(), separators=(",", ":"))
