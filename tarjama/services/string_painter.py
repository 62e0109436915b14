"""Applies a dictionary to the translatable nodes of a page."""

from collections.abc import Iterable, Mapping
from typing import Protocol

from tarjama.i18n import text_direction


class TranslatableNode(Protocol):
    text: str
    visible: bool

    @property
    def translation_key(self) -> str | None: ...


class PaintSurface(Protocol):
    def translatable_nodes(self) -> Iterable[TranslatableNode]: ...

    def set_language_metadata(self, lang: str, direction: str) -> None: ...


class StringPainter:
    def __init__(self, surface: PaintSurface):
        self.surface = surface

    def paint(self, dictionary: Mapping[str, str]) -> int:
        """Replace the text of every node whose key has a value.

        Nodes with a missing key keep whatever they already show.
        """
        painted = 0
        for node in self.surface.translatable_nodes():
            key = node.translation_key
            if key and dictionary.get(key) is not None:
                node.text = dictionary[key]
                painted += 1
        return painted

    def hide_all(self) -> None:
        for node in self.surface.translatable_nodes():
            node.visible = False

    def show_all(self) -> None:
        for node in self.surface.translatable_nodes():
            node.visible = True

    def apply_language(self, locale: str) -> None:
        self.surface.set_language_metadata(locale, text_direction(locale))
