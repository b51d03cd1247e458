"""
seeded test-record generator.

a schema is a dict of field -> definition, where a definition is
  - a faker provider name ('word', 'name', 'city'),
  - a (provider, kwargs) tuple (('pyint', {'min_value': 1, 'max_value': 9})),
  - a choice dict ({'_qen_provider': 'choice', 'from': [...]}),
  - a nested schema dict,
  - or any other value, used literally.
"""

from typing import Any, Dict, Optional

import numpy as np
from faker import Faker

from linqy import Enumerable, from_iterable


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'") from None
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            options = config["from"]
            # index into the options so the value keeps its python type
            return options[int(self._rng.integers(0, len(options)))]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
