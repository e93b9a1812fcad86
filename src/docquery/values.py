"""Document values: a closed set of seven kinds, and the YAML loader producing them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

import yaml

# ---- Value kinds ----


@dataclass(frozen=True)
class NullValue:
    kind: ClassVar[str] = "null"


@dataclass(frozen=True)
class BoolValue:
    kind: ClassVar[str] = "bool"
    value: bool


@dataclass(frozen=True)
class NumberValue:
    kind: ClassVar[str] = "number"
    value: int | float


@dataclass(frozen=True)
class StringValue:
    kind: ClassVar[str] = "string"
    value: str


@dataclass(frozen=True)
class SequenceValue:
    kind: ClassVar[str] = "sequence"
    items: tuple[Value, ...] = ()


@dataclass(frozen=True)
class MappingValue:
    """Ordered key/value pairs. Keys may be any value, not only strings."""
    kind: ClassVar[str] = "mapping"
    entries: tuple[tuple[Value, Value], ...] = ()
    _by_name: dict[str, Value] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        by_name: dict[str, Value] = {}
        for key, value in self.entries:
            if isinstance(key, StringValue):
                by_name.setdefault(key.value, value)
        object.__setattr__(self, "_by_name", by_name)

    def get(self, name: str) -> Value | None:
        """Look up the value stored under a string key."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


@dataclass(frozen=True)
class TaggedValue:
    """A value carrying an application tag, e.g. `!Ref foo`."""
    kind: ClassVar[str] = "tagged"
    tag: str
    value: Value


Value = Union[
    NullValue, BoolValue, NumberValue, StringValue,
    SequenceValue, MappingValue, TaggedValue,
]

NULL = NullValue()


def from_python(obj: Any) -> Value:
    """Convert plain Python data (as produced by a YAML/JSON loader) to a Value."""
    if obj is None:
        return NULL
    if isinstance(obj, (NullValue, BoolValue, NumberValue, StringValue,
                        SequenceValue, MappingValue, TaggedValue)):
        return obj
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, (int, float)):
        return NumberValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, (list, tuple)):
        return SequenceValue(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        return MappingValue(tuple((from_python(k), from_python(v)) for k, v in obj.items()))
    raise TypeError(f"Unsupported document value of type {type(obj).__name__}")


# ---- YAML loading ----

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """Safe loader following the YAML 1.2 core schema for booleans and dates.

    Only true/false are booleans (no yes/no/on/off) and timestamps stay
    strings. Local tags such as `!Ref` produce TaggedValue instead of failing.
    """


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _construct_tagged(loader: DocumentLoader, tag_suffix: str, node: yaml.Node) -> TaggedValue:
    if isinstance(node, yaml.ScalarNode):
        # Resolve the untagged scalar as if the tag were absent
        tag = loader.resolve(yaml.ScalarNode, node.value, (node.style is None, True))
        inner = loader.construct_object(
            yaml.ScalarNode(tag, node.value, node.start_mark, node.end_mark, node.style),
        )
    elif isinstance(node, yaml.SequenceNode):
        inner = loader.construct_sequence(node, deep=True)
    else:
        inner = loader.construct_mapping(node, deep=True)
    return TaggedValue(tag="!" + tag_suffix, value=from_python(inner))


DocumentLoader.add_multi_constructor("!", _construct_tagged)


def load_document(text: str) -> Value:
    """Parse YAML (or JSON) text into a Value tree.

    An empty document is null. Raises SyntaxError for malformed text.
    """
    try:
        data = yaml.load(text, Loader=DocumentLoader)
        return from_python(data)
    except (yaml.YAMLError, TypeError) as exc:
        raise SyntaxError(f"Invalid document: {exc}") from exc
