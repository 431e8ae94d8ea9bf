##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Deterministic construction of synthetic `SimpleEntityNotNull` instances.

Every field value is derived from an integer seed and wrapped into the range of
the column's semantic type, so the same seed always produces an equal entity and
every value survives a round trip through the database unchanged.
"""

from typing import Any, Dict, List

from crudbench.db_scripts.data_models import SimpleEntityNotNull


BYTE_ARRAY_LENGTH = 8
FLOAT_MANTISSA_BITS = 24


def _wrap_signed(value: int, bits: int) -> int:
    """
    Wrap `value` into the range of a signed two's complement integer of `bits` bits.

    Args:
        value: The value to wrap.
        bits: The width of the integer type.

    Returns:
        The wrapped value.
    """
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def create_entity(seed: int) -> SimpleEntityNotNull:
    """
    Create a transient `SimpleEntityNotNull` whose fields are derived from `seed`.

    The identifier is left unset; it is generated by the database on insert.

    Args:
        seed: The integer every field value is derived from.

    Returns:
        A new, unsaved entity.
    """
    return SimpleEntityNotNull(
        simple_boolean=seed % 2 == 0,
        simple_byte=_wrap_signed(seed, 8),
        simple_short=_wrap_signed(seed, 16),
        simple_int=_wrap_signed(seed, 32),
        simple_long=_wrap_signed((seed << 32) + seed, 64),
        # Quarters of an integer below 2**24 are exact in single precision
        simple_float=(seed % (1 << FLOAT_MANTISSA_BITS)) / 4,
        simple_double=seed / 3,
        simple_string=f"crudbench entity {seed}",
        simple_byte_array=bytes((seed + offset) % 256 for offset in range(BYTE_ARRAY_LENGTH)),
    )


def create_entities(count: int) -> List[SimpleEntityNotNull]:
    """
    Create `count` synthetic entities from the seeds `0..count-1`.

    Args:
        count: The number of entities to create.

    Returns:
        A list of new, unsaved entities.
    """
    return [create_entity(seed) for seed in range(count)]


def entity_values(entity: SimpleEntityNotNull) -> Dict[str, Any]:
    """
    Get every field value of `entity` except its identifier.

    Args:
        entity: The entity to read.

    Returns:
        The non-key field values keyed by attribute name.
    """
    return entity.to_dict(include_id=False)
