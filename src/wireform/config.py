"""src/wireform/config.py

Serializer configuration.
"""

from dataclasses import dataclass
from typing import Literal, Union

__all__ = ["ProtectionMode", "SerializerOptions"]

ProtectionMode = Union[bool, Literal["proto", "constructor"]]

_PROTECTION_MODES = (False, True, "proto", "constructor")


@dataclass(frozen=True)
class SerializerOptions:
    """
    Immutable serializer configuration.

    Attributes:
        enable_prototype_poisoning_protection: ``False`` disables the guard,
            ``True`` rejects both ``__proto__`` and ``constructor.prototype``
            keys, ``"proto"`` or ``"constructor"`` reject only that vector.
    """

    enable_prototype_poisoning_protection: ProtectionMode = False

    def __post_init__(self) -> None:
        mode = self.enable_prototype_poisoning_protection
        # 0 == False and 1 == True, so compare identity for booleans
        if not any(
            mode is allowed or (isinstance(allowed, str) and mode == allowed)
            for allowed in _PROTECTION_MODES
        ):
            raise ValueError(
                "enable_prototype_poisoning_protection must be one of "
                f"False, True, 'proto', 'constructor', got {mode!r}"
            )

    @classmethod
    def from_value(cls, mode: ProtectionMode) -> "SerializerOptions":
        """Create options from a bare protection mode."""
        return cls(enable_prototype_poisoning_protection=mode)

    @property
    def protects_proto(self) -> bool:
        """Whether ``__proto__`` keys are rejected."""
        return self.enable_prototype_poisoning_protection in (True, "proto")

    @property
    def protects_constructor(self) -> bool:
        """Whether ``constructor.prototype`` paths are rejected."""
        return self.enable_prototype_poisoning_protection in (True, "constructor")

    @property
    def protection_enabled(self) -> bool:
        """Whether any poisoning vector is guarded."""
        return self.protects_proto or self.protects_constructor
