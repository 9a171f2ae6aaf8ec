"""src/wireform/serializer.py

Serializer facade for Wireform.

Converts application values to and from the wire formats an HTTP API client
sends and receives: JSON documents, newline-delimited JSON bulk bodies and
query strings.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from wireform.codecs import guard, jsonlib, ndjson, querystring
from wireform.config import ProtectionMode, SerializerOptions
from wireform.exceptions import DeserializationError, SerializationError

__all__ = ["Serializer"]


class Serializer:
    """
    Wire-format serializer shared by every request of a client.

    Instances hold only immutable configuration and may be shared freely
    between threads and tasks.

    Attributes:
        mimetype: Content type of ``serialize`` output.
        ndjson_mimetype: Content type of ``ndserialize`` output.
    """

    __slots__ = ("_options", "_pairs_hook")

    mimetype = "application/json"
    ndjson_mimetype = "application/x-ndjson"

    def __init__(
        self,
        options: Optional[SerializerOptions] = None,
        *,
        enable_prototype_poisoning_protection: Optional[ProtectionMode] = None,
    ) -> None:
        """
        Initialize a Serializer.

        Args:
            options: Serializer configuration.
            enable_prototype_poisoning_protection: Shortcut building options
                with the given protection mode. Mutually exclusive with
                ``options``.
        """
        if enable_prototype_poisoning_protection is not None:
            if options is not None:
                raise ValueError(
                    "Pass either options or enable_prototype_poisoning_protection, "
                    "not both"
                )
            options = SerializerOptions.from_value(
                enable_prototype_poisoning_protection
            )
        elif options is None:
            options = SerializerOptions()

        if not isinstance(options, SerializerOptions):
            raise TypeError(
                "options must be a SerializerOptions instance, got "
                f"{type(options).__name__}"
            )

        self._options = options
        self._pairs_hook = guard.build_pairs_hook(
            proto=self._options.protects_proto,
            constructor=self._options.protects_constructor,
        )

    @property
    def options(self) -> SerializerOptions:
        """The configuration this serializer was built with."""
        return self._options

    def serialize(self, value: Any) -> str:
        """
        Encode a value as a single JSON document.

        Raises:
            SerializationError: If the value is cyclic or not encodable.
        """
        try:
            return jsonlib.dumps(value)
        except (ValueError, TypeError, RecursionError) as exc:
            raise SerializationError(str(exc), cause=exc, data=value) from exc

    def deserialize(self, text: Union[str, bytes, bytearray]) -> Any:
        """
        Parse a JSON document.

        Raises:
            DeserializationError: If the text is not valid JSON or, with
                protection enabled, holds a prototype-poisoning key.
        """
        try:
            return jsonlib.loads(text, object_pairs_hook=self._pairs_hook)
        except (ValueError, TypeError, RecursionError) as exc:
            raise DeserializationError(str(exc), cause=exc, data=text) from exc

    def ndserialize(self, items: Sequence[Any]) -> str:
        """
        Encode a sequence of documents as newline-delimited JSON.

        String items are taken as already-encoded JSON.

        Raises:
            SerializationError: If ``items`` is not a list or tuple, or an
                item cannot be encoded.
        """
        if not ndjson.is_array(items):
            cause = TypeError("obj must be an array")
            raise SerializationError(str(cause), cause=cause, data=items) from cause
        return ndjson.dumps(items, self.serialize)

    def qserialize(self, value: Union[Mapping[Any, Any], str, None]) -> str:
        """
        Encode query parameters.

        Args:
            value: None, a parameter mapping, or an already-encoded query
                string which is returned unchanged.
        """
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return querystring.encode(value)
