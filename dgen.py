'''
seeded fake-record generator for the queryable test suites.

a schema is a dict of field -> definition, where a definition is one of:
  'word'                                    a faker provider name
  ('pyint', {'min_value': 1})               a faker provider with kwargs
  {'_gen': 'choice', 'from': [...]}         a numpy rng choice
  anything else                             used as-is
'''

import numpy as np
from faker import Faker
from queryable import from_iterable, Queryable
from typing import Any, Dict, Optional


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
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_generator(self, config: Dict) -> Any:
        kind = config["_gen"]
        if kind == "choice":
            # numpy returns numpy scalars, hand back native python values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        raise ValueError(f"unknown _gen: '{kind}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_gen" in schema:
                return self._resolve_generator(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._resolve_faker_method(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Queryable:
        return from_iterable(self._generator.create(self._schema) for _ in range(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
