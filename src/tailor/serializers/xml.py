# topmark:header:start
#
#   project      : Tailor
#   file         : xml.py
#   file_relpath : src/tailor/serializers/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XML serializer: renders the filtered tree as an element hierarchy.

Output format:
  - The document element is named ``root_key``.
  - Mapping members become elements named by their key. With ``sort_keys``
    (default) they are emitted in case-insensitive alphabetical order (keys
    equal up to case are ordered by their exact text), so the output does not
    depend on dict insertion order; otherwise insertion order is kept. A key
    that is not a valid element name raises `InvalidElementNameError` while
    the document is built.
  - Sequence members become sibling elements all named ``item_key``, in
    sequence order (never sorted). Sets have no order and are emitted sorted
    by their text form.
  - Scalars become element text (``None`` -> no text, booleans -> ``true``/``false``);
    code points XML cannot carry are dropped from the text.
  - Attached metadata is one extra child of the document element, named
    ``meta_key`` and rendered with the same rules.

Documents start with ``<?xml version="1.0"?>`` and end with a newline.
`XmlSerializer.scope_root_key` and `XmlSerializer.meta` operate on rendered
text: they parse it, edit the element tree and serialize it again.

Example (default settings, item ``{"name": "Ann", "id": 5}``):

    <?xml version="1.0"?>
    <root><id>5</id><name>Ann</name></root>
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from tailor.config.logging import get_logger
from tailor.constants import (
    DEFAULT_ITEM_KEY,
    DEFAULT_META_KEY,
    DEFAULT_ROOT_KEY,
    DEFAULT_SORT_KEYS,
    XML_DECLARATION,
)
from tailor.core.errors import InvalidElementNameError
from tailor.core.payloads import classify, scalar_text
from tailor.serializers.base import Serializer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tailor.config.logging import TailorLogger
    from tailor.config.model import Config
    from tailor.resources.base import Resource
    from tailor.scope import Scope

logger: TailorLogger = get_logger(__name__)

# A letter or underscore, then letters, digits, underscores, hyphens or dots (no namespaces)
_ELEMENT_NAME: re.Pattern[str] = re.compile(r"[^\W\d][\w.\-]*")


def element_name(key: object) -> str:
    """Return ``key`` as an XML element name.

    Args:
        key (object): A mapping key or configured element name.

    Returns:
        str: The element name.

    Raises:
        InvalidElementNameError: If ``str(key)`` is not a valid element name.
    """
    name: str = str(key)
    if _ELEMENT_NAME.fullmatch(name) is None:
        raise InvalidElementNameError(key)
    return name


class XmlSerializer(Serializer):
    """Tree-building encoder producing XML text.

    Attributes:
        root_key (str): Name of the document element.
        meta_key (str): Name of the element wrapping attached metadata.
        item_key (str): Name of the element wrapping each sequence member.
        sort_keys (bool): Sort mapping keys case-insensitively when True.
    """

    def __init__(
        self,
        *,
        root_key: str = DEFAULT_ROOT_KEY,
        meta_key: str = DEFAULT_META_KEY,
        item_key: str = DEFAULT_ITEM_KEY,
        sort_keys: bool = DEFAULT_SORT_KEYS,
    ) -> None:
        self.root_key: str = element_name(root_key)
        self.meta_key: str = element_name(meta_key)
        self.item_key: str = element_name(item_key)
        self.sort_keys: bool = sort_keys

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(root_key={self.root_key!r}, meta_key={self.meta_key!r}, "
            f"item_key={self.item_key!r}, sort_keys={self.sort_keys!r})"
        )

    @classmethod
    def from_config(cls, config: Config) -> XmlSerializer:
        """Build a serializer from the ``[xml]`` settings of ``config``."""
        return cls(
            root_key=config.xml_root_key,
            meta_key=config.xml_meta_key,
            item_key=config.xml_item_key,
            sort_keys=config.xml_sort_keys,
        )

    # ------------------------------ Rendering ------------------------------

    def populate_node(self, parent: ET.Element, contents: Any) -> None:
        """Recursively render ``contents`` into ``parent``.

        Args:
            parent (ET.Element): The element receiving children or text.
            contents (Any): A mapping, a sequence or a scalar.

        Raises:
            InvalidElementNameError: If a mapping key is not a valid element name.
        """
        match classify(contents):
            case "sequence":
                for element in self._sequence_elements(contents):
                    child: ET.Element = ET.SubElement(parent, self.item_key)
                    self.populate_node(child, element)
            case "mapping":
                mapping: Mapping[Any, Any] = contents
                for key in self._ordered_keys(mapping):
                    child = ET.SubElement(parent, element_name(key))
                    self.populate_node(child, mapping[key])
            case _:
                parent.text = scalar_text(contents)

    def _ordered_keys(self, mapping: Mapping[Any, Any]) -> list[Any]:
        keys: list[Any] = list(mapping.keys())
        if self.sort_keys:
            keys.sort(key=lambda k: (str(k).lower(), str(k)))
        return keys

    @staticmethod
    def _sequence_elements(contents: Iterable[Any]) -> list[Any]:
        if isinstance(contents, (set, frozenset)):
            return sorted(contents, key=str)
        return list(contents)

    def data(self, resource: Resource, scope: Scope) -> str:
        """Render ``resource.process(scope)`` under a ``root_key`` document element."""
        root: ET.Element = ET.Element(self.root_key)
        self.populate_node(root, resource.process(scope))
        return self._to_document(root)

    def scope_root_key(self, rendered: str, identifier: str) -> str:
        """Move every child of the document element under a new ``identifier`` element.

        Child order is preserved. Text directly inside the document element
        (a scalar payload) moves along with the children.

        Args:
            rendered (str): A document previously returned by `data`.
            identifier (str): Name of the wrapper element; empty leaves ``rendered`` unchanged.

        Returns:
            str: The re-rooted document.

        Raises:
            InvalidElementNameError: If ``identifier`` is not a valid element name.
        """
        if not identifier:
            return rendered

        root: ET.Element = ET.fromstring(rendered)
        wrapper: ET.Element = ET.Element(element_name(identifier))
        wrapper.text, root.text = root.text, None
        for child in list(root):
            root.remove(child)
            wrapper.append(child)
        root.append(wrapper)
        logger.trace("XmlSerializer: re-rooted payload under <%s>", identifier)
        return self._to_document(root)

    def meta(self, resource: Resource, scope: Scope, rendered: str) -> str:
        """Append a ``meta_key`` element holding ``resource.get_meta()`` to the document element.

        Args:
            resource (Resource): The resource whose metadata is attached.
            scope (Scope): The top-level scope (unused).
            rendered (str): A document previously returned by `data` / `scope_root_key`.

        Returns:
            str: The document with the metadata element appended.
        """
        root: ET.Element = ET.fromstring(rendered)
        meta_node: ET.Element = ET.SubElement(root, self.meta_key)
        self.populate_node(meta_node, resource.get_meta())
        return self._to_document(root)

    @staticmethod
    def _to_document(root: ET.Element) -> str:
        return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"
