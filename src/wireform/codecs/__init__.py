"""src/wireform/codecs/__init__.py

Codec layer for Wireform.

This module provides the low-level encoders and decoders the ``Serializer``
facade delegates to: JSON, newline-delimited JSON and query strings, plus the
prototype-poisoning guard applied while parsing JSON.
"""

from . import guard, jsonlib, ndjson, querystring

__all__ = ["guard", "jsonlib", "ndjson", "querystring"]
