"""
Generator Registry

Maps entity kinds to their generators and provides ``MockDataGenerator``,
the entry point that produces one record of a requested kind.
"""

import time
from typing import Callable, Dict, List, Optional, Any
import logging

from .base import EntityGenerator, RandomSource, default_random_source
from .user import UserGenerator
from ..exceptions import UnsupportedTypeError
from ..models import User

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[RandomSource, str], EntityGenerator]

GENERATOR_REGISTRY: Dict[str, GeneratorFactory] = {
    "user": UserGenerator,
}


def register_generator(entity_type: str, factory: GeneratorFactory):
    """
    Register a generator for an entity kind

    Args:
        entity_type: Kind name (matched case-insensitively)
        factory: Callable taking ``(rng, locale)`` and returning a generator
    """
    GENERATOR_REGISTRY[entity_type.lower()] = factory
    logger.info(f"Registered generator: {entity_type.lower()}")


def supported_types() -> List[str]:
    """Names of all registered entity kinds"""
    return sorted(GENERATOR_REGISTRY)


def is_supported(entity_type: str) -> bool:
    return entity_type.lower() in GENERATOR_REGISTRY


class MockDataGenerator:
    """
    Produce single records of a requested kind

    ``seed`` and ``locale`` are stored for reference only: records are drawn
    from ``rng`` and neither value changes what is generated. An empty seed
    is replaced with the current time in milliseconds.
    """

    def __init__(
        self,
        seed: str = "",
        locale: str = "en-US",
        rng: Optional[RandomSource] = None,
        registry: Optional[Dict[str, GeneratorFactory]] = None
    ):
        """
        Initialize the generator

        Args:
            seed: Seed label (informational only)
            locale: Locale label (informational only)
            rng: Random source shared by all entity generators
            registry: Kind-to-factory mapping (module registry if None)
        """
        self.seed = seed or str(int(time.time() * 1000))
        self.locale = locale
        self.rng = rng or default_random_source()
        self.registry = registry if registry is not None else GENERATOR_REGISTRY
        self._generators: Dict[str, EntityGenerator] = {}

    def get_generator(self, entity_type: str) -> EntityGenerator:
        """
        Look up (and cache) the generator for a kind

        Raises:
            UnsupportedTypeError: If no generator is registered for the kind
        """
        kind = entity_type.lower()

        if kind not in self._generators:
            factory = self.registry.get(kind)
            if factory is None:
                raise UnsupportedTypeError(entity_type)
            self._generators[kind] = factory(self.rng, self.locale)

        return self._generators[kind]

    def generate(self, entity_type: str) -> Any:
        """Generate one record of ``entity_type``"""
        return self.get_generator(entity_type).generate()

    def generate_user(self) -> User:
        return self.generate("user")
