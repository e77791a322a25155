"""
Declarative field accumulation shared by all entity decoders.

Each decoder declares a table mapping every legal child tag to a Slot:

    one(name)       exactly one occurrence, mandatory
    optional(name)  zero or one occurrence
    many(name)      any number, kept in input order
    flag(name)      presence flag (<DELETION>), at most once

FieldAccumulator scans a container's children once, converts each payload
with the slot's converter and enforces the cardinality. A child whose tag is
not in the table is rejected.

Usage:
    >>> table = {ValueTag.CIK: one("cik"), ValueTag.ITEMS: many("items")}
    >>> scan_fields("Example", table, node.children)
    {'cik': '0000123456', 'items': ['1.01', '9.01']}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Union

from .errors import CardinalityViolation, InvalidFieldValue, UnrecognizedChild
from .tags import ContainerTag, ValueTag
from .tree import ContainerNode, GenericNode, TextNode, ValueNode
from .values import parse_flag, parse_text

ChildKey = Union[ContainerTag, ValueTag]


class Cardinality(Enum):
    ONE = "one"
    OPTIONAL = "optional"
    MANY = "many"
    FLAG = "flag"


@dataclass(frozen=True)
class Slot:
    name: str
    cardinality: Cardinality
    convert: Callable[[Any], Any]


FieldTable = Mapping[ChildKey, Slot]


def one(name: str, convert: Callable[[Any], Any] = parse_text) -> Slot:
    return Slot(name, Cardinality.ONE, convert)


def optional(name: str, convert: Callable[[Any], Any] = parse_text) -> Slot:
    return Slot(name, Cardinality.OPTIONAL, convert)


def many(name: str, convert: Callable[[Any], Any] = parse_text) -> Slot:
    return Slot(name, Cardinality.MANY, convert)


def flag(name: str) -> Slot:
    return Slot(name, Cardinality.FLAG, parse_flag)


class FieldAccumulator:
    """
    Collects converted child values for one entity.

    Attributes:
        entity: Entity name used in error messages (e.g. "CompanyData")
        table: Legal children of the entity and their slots
    """

    def __init__(self, entity: str, table: FieldTable):
        self.entity = entity
        self.table = table
        self._values: Dict[str, Any] = {}
        for slot in table.values():
            if slot.cardinality is Cardinality.MANY:
                self._values[slot.name] = []

    def add_node(self, node: GenericNode) -> None:
        """Dispatch a generic tree node to its slot."""
        if isinstance(node, ContainerNode):
            self.add(node.tag, node.children)
        elif isinstance(node, ValueNode):
            self.add(node.tag, node.value)
        elif isinstance(node, TextNode):
            self.add(ContainerTag.TEXT, node.text)
        else:
            raise UnrecognizedChild(self.entity, "an empty node")

    def add(self, key: ChildKey, payload: Any) -> None:
        """
        Convert `payload` and store it in the slot registered for `key`.

        Raises:
            UnrecognizedChild: `key` is not a legal child of the entity.
            CardinalityViolation: A single-valued slot is assigned twice.
            InvalidFieldValue: The converter rejected the payload.
        """
        slot = self.table.get(key)
        if slot is None:
            raise UnrecognizedChild(self.entity, _describe(key))

        try:
            value = slot.convert(payload)
        except InvalidFieldValue as exc:
            if exc.field is not None:
                raise
            raise InvalidFieldValue(
                exc.value, exc.expected, field=f"{self.entity}.{slot.name}"
            ) from exc

        if slot.cardinality is Cardinality.MANY:
            self._values[slot.name].append(value)
            return

        if slot.name in self._values:
            raise CardinalityViolation(
                self.entity, slot.name, f"{_describe(key)} appears more than once"
            )
        self._values[slot.name] = value

    def finish(self) -> Dict[str, Any]:
        """
        Return the collected values as keyword arguments for the record.

        Raises:
            CardinalityViolation: A mandatory slot was never assigned.
        """
        for key, slot in self.table.items():
            if slot.cardinality is Cardinality.ONE and slot.name not in self._values:
                raise CardinalityViolation(
                    self.entity, slot.name, f"missing mandatory {_describe(key)}"
                )
        return dict(self._values)


def scan_fields(entity: str, table: FieldTable, children: Iterable[GenericNode]) -> Dict[str, Any]:
    """Scan `children` once and return the accumulated field values."""
    accumulator = FieldAccumulator(entity, table)
    for child in children:
        accumulator.add_node(child)
    return accumulator.finish()


def _describe(key: ChildKey) -> str:
    if key is ContainerTag.TEXT:
        return "<TEXT> block"
    if isinstance(key, ContainerTag):
        return f"<{key.value}> container"
    return f"<{key.value}> value"
