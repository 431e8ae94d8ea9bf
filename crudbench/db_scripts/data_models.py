##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
This module houses the ORM-mapped dataclasses that define the format of the data
that's stored in crudbench's database.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import BigInteger, Boolean, Double, Float, Integer, LargeBinary, SmallInteger, Text, inspect
from sqlalchemy.orm import ColumnProperty, DeclarativeBase, Mapped, MappedAsDataclass, mapped_column


LOG = logging.getLogger(__name__)


class BaseDataModel(MappedAsDataclass, DeclarativeBase):
    """
    A base class for the ORM-mapped dataclasses stored by crudbench.

    Every subclass maps to exactly one table whose primary key column is `id`.
    The primary key is excluded from `__init__`; it's only ever set by the
    persistence layer.

    Methods:
        get_class_fields (classmethod):
            Retrieve the column attributes mapped for this class.

        get_column_names (classmethod):
            Retrieve the attribute names of every mapped column.

        to_dict:
            Convert the instance to a dictionary of column values.
    """

    @classmethod
    def get_class_fields(cls) -> List[ColumnProperty]:
        """
        Get the column attributes mapped for this class.

        Returns:
            A list of `ColumnProperty` objects, in table column order.
        """
        return list(inspect(cls).column_attrs)

    @classmethod
    def get_column_names(cls, include_id: bool = True) -> List[str]:
        """
        Get the attribute names of every mapped column.

        Args:
            include_id: If False, the primary key attribute is left out.

        Returns:
            A list of attribute names.
        """
        return [attr.key for attr in cls.get_class_fields() if include_id or attr.key != "id"]

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        """
        Convert the instance to a dictionary of column values.

        Args:
            include_id: If False, the primary key is left out.

        Returns:
            The column values keyed by attribute name.
        """
        return {name: getattr(self, name) for name in self.get_column_names(include_id=include_id)}


class SimpleEntityNotNull(BaseDataModel):
    """
    A flat record with one column of each scalar type the benchmark exercises.
    Every column besides the key is NOT NULL.

    Attributes:
        id: The identifier generated by the database on insert.
        simple_boolean: A boolean.
        simple_byte: An 8-bit signed integer.
        simple_short: A 16-bit signed integer.
        simple_int: A 32-bit signed integer.
        simple_long: A 64-bit signed integer.
        simple_float: A single precision float.
        simple_double: A double precision float.
        simple_string: A text string.
        simple_byte_array: A variable-length byte sequence.
    """

    __tablename__ = "SIMPLE_ENTITY_NOT_NULL"

    simple_boolean: Mapped[bool] = mapped_column(Boolean, nullable=False)
    simple_byte: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    simple_short: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    simple_int: Mapped[int] = mapped_column(Integer, nullable=False)
    simple_long: Mapped[int] = mapped_column(BigInteger, nullable=False)
    simple_float: Mapped[float] = mapped_column(Float, nullable=False)
    simple_double: Mapped[float] = mapped_column(Double, nullable=False)
    simple_string: Mapped[str] = mapped_column(Text, nullable=False)
    simple_byte_array: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, init=False)


class MinimalEntity(BaseDataModel):
    """
    A record holding nothing but its identifier. Only used to probe how the
    persistence layer treats generated keys and loaded instances.

    Attributes:
        id: The identifier generated by the database on insert.
    """

    __tablename__ = "MINIMAL_ENTITY"

    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, init=False)
