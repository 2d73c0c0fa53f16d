"""Registry of normalizer classes by entity name"""
from typing import Any, Dict, List, Type
import logging

from fieldmetadata.core.exceptions import NormalizerContractError, NormalizerNotRegisteredError
from fieldmetadata.core.logging import get_logger, safe_log

from .normalizer import Normalizer

logger = get_logger(__name__)


class NormalizerRegistry:
    """Maps entity names (e.g. "CustomGroup") to Normalizer subclasses"""

    def __init__(self):
        self._normalizers: Dict[str, Type[Any]] = {}

    def register(self, entity: str, normalizer_class: Type[Any]) -> None:
        """Register (or replace) the normalizer class for an entity"""
        self._normalizers[entity] = normalizer_class

    def entities(self) -> List[str]:
        return list(self._normalizers)

    def get_instance_for_entity(self, entity: str, *args: Any, **kwargs: Any) -> Normalizer:
        """
        Instantiate the normalizer registered for an entity.

        Args:
            entity: Name of the entity whose metadata is normalized
            *args, **kwargs: Passed to the normalizer constructor

        Raises:
            NormalizerNotRegisteredError: nothing is registered for entity
            NormalizerContractError: the registered class is not a Normalizer
        """
        normalizer_class = self._normalizers.get(entity)
        if normalizer_class is None:
            safe_log(logger, logging.ERROR, "No normalizer registered", entity=entity)
            raise NormalizerNotRegisteredError(f"No Normalizer class has been registered for '{entity}'")

        if not (isinstance(normalizer_class, type) and issubclass(normalizer_class, Normalizer)):
            safe_log(logger, logging.ERROR, "Registered normalizer has wrong type", entity=entity)
            raise NormalizerContractError(
                f"Normalizer class '{getattr(normalizer_class, '__name__', normalizer_class)}' "
                f"does not extend the 'Normalizer' base class"
            )

        return normalizer_class(*args, **kwargs)


def load_builtin_normalizers(registry: NormalizerRegistry) -> None:
    """Register the normalizers shipped with this package"""
    from .entities import CustomGroupNormalizer, ProfileNormalizer

    for normalizer_class in (CustomGroupNormalizer, ProfileNormalizer):
        registry.register(normalizer_class.entity, normalizer_class)
