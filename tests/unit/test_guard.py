"""tests/unit/test_guard.py"""

import pytest

from wireform.codecs.guard import PoisonedKeyError, build_pairs_hook


def test_no_hook_when_disabled():
    """Test that no hook is built when neither vector is guarded."""
    assert build_pairs_hook(proto=False, constructor=False) is None


def test_proto_key():
    """Test rejection of a __proto__ key."""
    hook = build_pairs_hook(proto=True, constructor=False)
    with pytest.raises(PoisonedKeyError) as exc_info:
        hook([("__proto__", {})])
    assert exc_info.value.key == "__proto__"
    assert isinstance(exc_info.value, ValueError)


def test_constructor_prototype():
    """Test rejection of a constructor.prototype path."""
    hook = build_pairs_hook(proto=False, constructor=True)
    with pytest.raises(PoisonedKeyError, match="constructor.prototype"):
        hook([("constructor", {"prototype": {}})])


def test_constructor_without_prototype():
    """Test that a constructor key alone is allowed."""
    hook = build_pairs_hook(proto=True, constructor=True)
    assert hook([("constructor", {"name": "x"})]) == {"constructor": {"name": "x"}}
    assert hook([("constructor", "prototype")]) == {"constructor": "prototype"}


def test_unguarded_vector_passes():
    """Test that the vector not selected is left alone."""
    hook = build_pairs_hook(proto=False, constructor=True)
    assert hook([("__proto__", 1)]) == {"__proto__": 1}


def test_duplicate_keys_last_wins():
    """Test that clean objects keep the last duplicate value."""
    hook = build_pairs_hook(proto=True, constructor=True)
    assert hook([("a", 1), ("a", 2)]) == {"a": 2}
