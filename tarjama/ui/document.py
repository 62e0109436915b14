"""In-memory page model: elements, attributes, classes and translatable nodes."""

from __future__ import annotations

from collections.abc import Iterator
from html.parser import HTMLParser

I18N_ATTR = "data-i18n"
AOS_ATTR = "data-aos"
AOS_TYPO_ATTR = "data-aso"

_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)


class Element:
    def __init__(
        self,
        tag: str,
        attrs: dict[str, str] | None = None,
        text: str = "",
    ):
        self.tag = tag.lower()
        self.attrs: dict[str, str] = dict(attrs or {})
        self.text = text
        self.children: list[Element] = []
        self.parent: Element | None = None

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        return f"<Element {self.tag}{ident}>"

    # -- tree --

    def append(self, child: Element) -> Element:
        child.parent = self
        self.children.append(child)
        return child

    def iter(self) -> Iterator[Element]:
        """Depth-first, document order, including self."""
        yield self
        for child in self.children:
            yield from child.iter()

    def closest(self, element_id: str) -> Element | None:
        """Nearest ancestor-or-self with the given id."""
        node: Element | None = self
        while node is not None:
            if node.id == element_id:
                return node
            node = node.parent
        return None

    def is_inside(self, other: Element) -> bool:
        node: Element | None = self
        while node is not None:
            if node is other:
                return True
            node = node.parent
        return False

    # -- attributes --

    @property
    def id(self) -> str:
        return self.attrs.get("id", "")

    def get_attribute(self, name: str) -> str | None:
        return self.attrs.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    def remove_attribute(self, name: str) -> None:
        self.attrs.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        return name in self.attrs

    # -- classes --

    @property
    def classes(self) -> list[str]:
        return self.attrs.get("class", "").split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def toggle_class(self, name: str, force: bool | None = None) -> bool:
        """Add or remove ``name``; ``force`` pins the result like ``classList.toggle``."""
        classes = self.classes
        present = name in classes
        wanted = (not present) if force is None else force
        if wanted and not present:
            classes.append(name)
        elif not wanted and present:
            classes.remove(name)
        if classes:
            self.attrs["class"] = " ".join(classes)
        else:
            self.attrs.pop("class", None)
        return wanted

    # -- inline style --

    @property
    def style(self) -> dict[str, str]:
        raw = self.attrs.get("style", "")
        style: dict[str, str] = {}
        for decl in raw.split(";"):
            if ":" in decl:
                prop, value = decl.split(":", 1)
                style[prop.strip()] = value.strip()
        return style

    def set_style(self, prop: str, value: str) -> None:
        style = self.style
        style[prop] = value
        self.attrs["style"] = "; ".join(f"{k}: {v}" for k, v in style.items())

    # -- translatable node --

    @property
    def translation_key(self) -> str | None:
        return self.attrs.get(I18N_ATTR) or None

    @property
    def visible(self) -> bool:
        return self.style.get("visibility") != "hidden"

    @visible.setter
    def visible(self, value: bool) -> None:
        self.set_style("visibility", "visible" if value else "hidden")


class Document:
    """A parsed page: the ``<html>`` root plus lookup helpers."""

    def __init__(self, root: Element | None = None):
        self.root = root or Element("html")

    @classmethod
    def from_html(cls, markup: str) -> Document:
        parser = _TreeBuilder()
        parser.feed(markup)
        parser.close()
        return cls(parser.root)

    # -- root metadata --

    @property
    def lang(self) -> str:
        return self.root.get_attribute("lang") or ""

    @property
    def dir(self) -> str:
        return self.root.get_attribute("dir") or ""

    def set_language_metadata(self, lang: str, direction: str) -> None:
        self.root.set_attribute("lang", lang)
        self.root.set_attribute("dir", direction)

    # -- queries --

    def get_element_by_id(self, element_id: str) -> Element | None:
        for element in self.root.iter():
            if element.id == element_id:
                return element
        return None

    def query_all_with_attr(self, name: str) -> list[Element]:
        return [el for el in self.root.iter() if el.has_attribute(name)]

    def translatable_nodes(self) -> list[Element]:
        return self.query_all_with_attr(I18N_ATTR)


def fix_attribute_alias(
    document: Document, alias: str = AOS_TYPO_ATTR, canonical: str = AOS_ATTR
) -> int:
    """Rewrite every ``alias`` attribute to ``canonical``. Returns the count rewritten."""
    elements = document.query_all_with_attr(alias)
    for element in elements:
        element.set_attribute(canonical, element.attrs.pop(alias))
    return len(elements)


class _TreeBuilder(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = Element("html")
        self._stack: list[Element] = [self.root]

    def handle_starttag(self, tag, attrs):
        attributes = {name: value or "" for name, value in attrs}
        if tag == "html":
            self.root.attrs.update(attributes)
            return
        element = self._stack[-1].append(Element(tag, attributes))
        if tag not in _VOID_TAGS:
            self._stack.append(element)

    def handle_startendtag(self, tag, attrs):
        attributes = {name: value or "" for name, value in attrs}
        self._stack[-1].append(Element(tag, attributes))

    def handle_endtag(self, tag):
        if tag == "html":
            return
        # tolerate unclosed children by popping to the matching open tag
        for index in range(len(self._stack) - 1, 0, -1):
            if self._stack[index].tag == tag:
                del self._stack[index:]
                return

    def handle_data(self, data):
        text = data.strip()
        if text:
            current = self._stack[-1]
            current.text = f"{current.text} {text}" if current.text else text
