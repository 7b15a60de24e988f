"""
Provider Registry
=================
Auto-discovers arithmetic providers from YAML configs in provider_configs/.
Each YAML declares: provider class, the Python types it serves, metadata.
Each provider has a matching .py file in providers/ defining that class.

Usage:
    from genvector.registry import get_registry
    reg = get_registry()
    arithmetic = reg.provider_for_type(float)
    arithmetic.add(1.0, 2.0)
    # → 3.0
"""

import importlib
import logging
import numbers
from decimal import Decimal
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np
import yaml

from genvector import config
from genvector.arithmetic import Arithmetic

logger = logging.getLogger(__name__)


@dataclass
class ProviderSpec:
    """Provider specification from YAML config."""
    name: str
    version: str
    class_name: str
    types: List[str]
    category: str
    exact: bool
    description: str


def type_key(tp: type) -> str:
    """Qualified name used in YAML `types` lists, e.g. 'decimal.Decimal'."""
    return f"{tp.__module__}.{tp.__qualname__}"


class Registry:
    """
    Provider registry. Discovers providers from YAML configs.
    Lazily imports provider classes on first use.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(__file__).parent / 'provider_configs'
        self._specs: Dict[str, ProviderSpec] = {}
        self._by_type: Dict[str, str] = {}
        self._instances: Dict[Tuple[str, Optional[type]], Arithmetic] = {}
        self._discover()

    def _discover(self):
        """Scan provider_configs/ for YAML files."""
        if not self._config_dir.exists():
            logger.warning("Provider config directory missing: %s", self._config_dir)
            return
        for path in sorted(self._config_dir.glob('*.yaml')):
            name = path.stem
            with open(path) as f:
                cfg = yaml.safe_load(f)
            meta = cfg.get('metadata', {})
            spec = ProviderSpec(
                name=name,
                version=str(cfg.get('version', '1.0')),
                class_name=cfg['class'],
                types=cfg.get('types', []),
                category=meta.get('category', 'unknown'),
                exact=bool(meta.get('exact', False)),
                description=meta.get('description', ''),
            )
            self._specs[name] = spec
            for key in spec.types:
                self._by_type[key] = name
        logger.debug("Discovered %d arithmetic providers", len(self._specs))

    @property
    def provider_names(self) -> List[str]:
        """All discovered provider names."""
        return list(self._specs.keys())

    def get_spec(self, name: str) -> ProviderSpec:
        """Get provider specification."""
        if name not in self._specs:
            raise KeyError(f"Unknown provider: {name}. Available: {self.provider_names}")
        return self._specs[name]

    def get_provider(self, name: str, tp: Optional[type] = None) -> Arithmetic:
        """
        Get a provider instance by name. Lazily imported and cached
        per (name, type) so dtype-specific providers stay distinct.
        """
        key = (name, tp)
        if key in self._instances:
            return self._instances[key]

        spec = self.get_spec(name)
        module = importlib.import_module(f'genvector.providers.{name}')
        cls = getattr(module, spec.class_name)
        provider = cls.for_type(tp) if tp is not None else cls()
        logger.debug("Loaded provider %s for %s", name, tp)
        self._instances[key] = provider
        return provider

    def name_for_type(self, tp: type) -> str:
        """
        Map a Python type to a provider name.
        Exact declared type first, then numpy scalars, then base classes.
        """
        key = type_key(tp)
        if key in self._by_type:
            return self._by_type[key]
        if issubclass(tp, np.generic):
            return 'numpy_scalar'
        for base in tp.__mro__[1:]:
            key = type_key(base)
            if key in self._by_type:
                return self._by_type[key]
        raise TypeError(f"No arithmetic provider for element type {tp.__name__}")

    def provider_for_type(self, tp: type) -> Arithmetic:
        """Provider instance serving values of type `tp`."""
        name = self.name_for_type(tp)
        # Only dtype-parameterized providers need the concrete type
        return self.get_provider(name, tp if name == 'numpy_scalar' else None)

    def resolve(self, elements: Iterable[Any]) -> Arithmetic:
        """
        Pick a provider for a sequence of elements.

        Empty → configured default. One element type → its provider.
        Mixed types promote to the narrowest configured provider that
        Python arithmetic itself would accept: integral, decimal, real,
        then complex.
        """
        types = list(dict.fromkeys(type(e) for e in elements))

        if not types:
            return self.get_provider(config.get('providers.default'))

        if len(types) == 1:
            return self.provider_for_type(types[0])

        if all(issubclass(t, numbers.Integral) for t in types):
            name = config.get('providers.mixed_integral')
        elif all(issubclass(t, (Decimal, numbers.Integral)) for t in types):
            name = config.get('providers.mixed_decimal')
        elif all(issubclass(t, numbers.Real) for t in types):
            name = config.get('providers.mixed_real')
        elif all(issubclass(t, numbers.Complex) for t in types):
            name = config.get('providers.mixed_complex')
        else:
            names = ', '.join(t.__name__ for t in types)
            raise TypeError(f"Cannot combine element types: {names}")

        logger.debug("Promoting mixed element types %s to %s",
                     [t.__name__ for t in types], name)
        return self.get_provider(name)


# Module-level singleton
_registry: Optional[Registry] = None


def get_registry() -> Registry:
    """Get or create the global provider registry."""
    global _registry
    if _registry is None:
        _registry = Registry()
    return _registry
