"""src/wireform/__init__.py

Wireform - wire-format serialization for HTTP API clients.

Wireform converts application values to and from the formats an HTTP API
client puts on the wire. It is built entirely on Python's standard library.

Key Features:
    - Compact, strict JSON encode/decode
    - Newline-delimited JSON for bulk bodies
    - Query-string encoding with comma-joined multi-values
    - Opt-in prototype-poisoning protection when parsing JSON
    - Stateless, thread-safe serializer instances

Example:
    Basic usage::

        from wireform import Serializer

        serializer = Serializer()
        body = serializer.serialize({"query": {"match_all": {}}})
        bulk = serializer.ndserialize([{"index": {}}, {"hello": "world"}])
        query = serializer.qserialize({"filter_path": ["took", "hits"]})

    Guarding untrusted responses::

        serializer = Serializer(enable_prototype_poisoning_protection=True)
        serializer.deserialize('{"__proto__": {}}')  # raises DeserializationError
"""

from wireform.config import SerializerOptions
from wireform.exceptions import (
    DeserializationError,
    SerializationError,
    WireformError,
)
from wireform.serializer import Serializer
from wireform.version import __version__

__all__ = [
    "Serializer",
    "SerializerOptions",
    "WireformError",
    "SerializationError",
    "DeserializationError",
    "__version__",
]
