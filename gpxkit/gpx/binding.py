"""
Declarative XML bindings for pydantic models

Each model field declares its XML name and whether it is an attribute or a
child element (see `attribute` and `element`). `GPXCodec` walks those
declarations in both directions, so decoding and encoding share one mapping
and cannot drift apart.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Optional,
    Tuple,
    Type,
    Union,
    get_args,
    get_origin,
)

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..common.errors import GPXDecodeError, GPXEncodeError
from .types import GPX_NAMESPACE

ATTRIBUTE = "attribute"
ELEMENT = "element"

_XML_KEY = "xml"


class GPXModel(BaseModel):
    """Base for every record that maps onto a GPX element."""

    model_config = ConfigDict(extra="ignore")

    xml_tag: ClassVar[str] = ""
    xml_namespace: ClassVar[str] = GPX_NAMESPACE


def _bound_field(
    kind: str, name: str, default: Any, omit_empty: bool, kwargs: Dict[str, Any]
) -> Any:
    extra = {_XML_KEY: {"kind": kind, "name": name, "omit_empty": omit_empty}}
    if "default_factory" in kwargs:
        return Field(json_schema_extra=extra, **kwargs)
    return Field(default, json_schema_extra=extra, **kwargs)


def attribute(
    name: str, default: Any = ..., *, omit_empty: bool = False, **kwargs
) -> Any:
    """Bind a field to an XML attribute of the enclosing element."""
    return _bound_field(ATTRIBUTE, name, default, omit_empty, kwargs)


def element(
    name: str, default: Any = ..., *, omit_empty: bool = True, **kwargs
) -> Any:
    """Bind a field to a child element; list-typed fields repeat the element."""
    return _bound_field(ELEMENT, name, default, omit_empty, kwargs)


@dataclass(frozen=True)
class XMLBinding:
    """Resolved mapping between one model field and its XML node"""

    field_name: str
    xml_name: str
    kind: str
    omit_empty: bool
    target: type
    repeated: bool

    @property
    def is_model(self) -> bool:
        return isinstance(self.target, type) and issubclass(self.target, GPXModel)


def _resolve_target(annotation: Any) -> Tuple[type, bool]:
    """Unwrap List[...] and Optional[...] down to the bound type."""
    repeated = False
    origin = get_origin(annotation)
    if origin in (list, List):
        repeated = True
        (annotation,) = get_args(annotation)
        origin = get_origin(annotation)
    if origin is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) != 1:
            raise TypeError(f"Unsupported union in XML binding: {annotation!r}")
        annotation = args[0]
    return annotation, repeated


@lru_cache(maxsize=None)
def bindings_for(model_cls: Type[GPXModel]) -> Tuple[XMLBinding, ...]:
    """Return the XML bindings of a model class in declaration order."""
    bindings = []
    for field_name, info in model_cls.model_fields.items():
        extra = info.json_schema_extra
        if not isinstance(extra, dict) or _XML_KEY not in extra:
            continue
        spec = extra[_XML_KEY]
        target, repeated = _resolve_target(info.annotation)
        is_model = isinstance(target, type) and issubclass(target, GPXModel)
        if spec["kind"] == ATTRIBUTE and (repeated or is_model):
            raise TypeError(
                f"{model_cls.__name__}.{field_name}: attributes must be scalar"
            )
        bindings.append(
            XMLBinding(
                field_name=field_name,
                xml_name=spec["name"],
                kind=spec["kind"],
                omit_empty=spec["omit_empty"],
                target=target,
                repeated=repeated,
            )
        )
    return tuple(bindings)


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def _character_data(node: etree._Element) -> str:
    """All text directly inside `node`; nested elements and comments are skipped."""
    return "".join(node.xpath("text()"))


def _scalar_value(binding: XMLBinding, text: str) -> Optional[str]:
    """Raw text for a scalar field, or None to leave the field at its default."""
    if binding.target is str:
        return text
    # Numeric and enum text is trimmed; empty text means the zero value
    stripped = text.strip()
    return stripped or None


def _format_scalar(value: Any) -> str:
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def _is_empty(value: Any) -> bool:
    if isinstance(value, GPXModel):
        return value == type(value)()
    if isinstance(value, enum.Enum):
        return False
    return not value


class GPXCodec:
    """Generic walker between lxml elements and GPXModel records"""

    @staticmethod
    def collect(model_cls: Type[GPXModel], node: etree._Element) -> Dict[str, Any]:
        """Gather the raw (unvalidated) field values of `node` for `model_cls`.

        Attributes and child elements are matched by local name, so namespaced
        and bare documents read the same. Unknown nodes are ignored and a
        repeated singular element keeps its last occurrence.
        """
        bindings = bindings_for(model_cls)
        attributes = {b.xml_name: b for b in bindings if b.kind == ATTRIBUTE}
        elements = {b.xml_name: b for b in bindings if b.kind == ELEMENT}
        data: Dict[str, Any] = {}

        for key, raw in node.attrib.items():
            binding = attributes.get(_local_name(key))
            if binding is None:
                continue
            value = _scalar_value(binding, raw)
            if value is not None:
                data[binding.field_name] = value

        for child in node.iterchildren(tag=etree.Element):
            binding = elements.get(_local_name(child.tag))
            if binding is None:
                continue
            if binding.is_model:
                value = GPXCodec.collect(binding.target, child)
            else:
                value = _scalar_value(binding, _character_data(child))
                if value is None:
                    continue
            if binding.repeated:
                data.setdefault(binding.field_name, []).append(value)
            else:
                data[binding.field_name] = value

        return data

    @staticmethod
    def decode_element(model_cls: Type[GPXModel], node: etree._Element) -> GPXModel:
        """Build a validated `model_cls` record from an lxml element."""
        data = GPXCodec.collect(model_cls, node)
        try:
            return model_cls.model_validate(data)
        except ValidationError as exc:
            raise GPXDecodeError(
                f"<{_local_name(node.tag)}> does not match {model_cls.__name__}: {exc}"
            ) from exc

    @staticmethod
    def encode_element(
        record: GPXModel,
        tag: Optional[str] = None,
        parent: Optional[etree._Element] = None,
        nsmap: Optional[Dict[Optional[str], str]] = None,
    ) -> etree._Element:
        """Write `record` as an lxml element, appended to `parent` when given.

        Optional attributes, zero-valued scalar elements and empty composite
        elements are left out.
        """
        model_cls = type(record)
        qname = etree.QName(model_cls.xml_namespace, tag or model_cls.xml_tag)
        if parent is None:
            node = etree.Element(qname, nsmap=nsmap)
        else:
            node = etree.SubElement(parent, qname)

        try:
            for binding in bindings_for(model_cls):
                value = getattr(record, binding.field_name)
                if binding.kind == ATTRIBUTE:
                    if binding.omit_empty and _is_empty(value):
                        continue
                    node.set(binding.xml_name, _format_scalar(value))
                    continue

                values = value if binding.repeated else [value]
                for item in values:
                    if not binding.repeated and binding.omit_empty and _is_empty(item):
                        continue
                    if binding.is_model:
                        GPXCodec.encode_element(item, tag=binding.xml_name, parent=node)
                    else:
                        child = etree.SubElement(
                            node, etree.QName(model_cls.xml_namespace, binding.xml_name)
                        )
                        child.text = _format_scalar(item)
        except GPXEncodeError:
            raise
        except ValueError as exc:
            raise GPXEncodeError(f"Cannot write {model_cls.__name__}: {exc}") from exc

        return node
