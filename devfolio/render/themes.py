"""Theme registry: maps a theme identifier to its renderer.

Adding a theme is a registration, not an edit to the dispatcher.  Lookups for
an identifier that was never registered resolve to the registry's default
entry instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# render(data, now, *, inject_custom_css=True) -> html
ThemeRenderFn = Callable[..., str]


@dataclass(frozen=True)
class ThemeEntry:
    """A registered theme."""

    id: str
    name: str
    render: ThemeRenderFn
    template: str = ""


class ThemeRegistry:
    """Lookup table of theme renderers with a default fallback entry."""

    def __init__(self, default_id: str) -> None:
        self.default_id = default_id
        self._entries: dict[str, ThemeEntry] = {}

    def register(
        self,
        theme_id: str,
        name: str,
        render: ThemeRenderFn,
        *,
        template: str = "",
    ) -> ThemeEntry:
        """Register (or replace) the renderer for *theme_id*."""
        entry = ThemeEntry(id=theme_id, name=name, render=render, template=template)
        self._entries[theme_id] = entry
        return entry

    def theme(
        self, theme_id: str, name: str, *, template: str = ""
    ) -> Callable[[ThemeRenderFn], ThemeRenderFn]:
        """Decorator form of :meth:`register`."""

        def decorator(render: ThemeRenderFn) -> ThemeRenderFn:
            self.register(theme_id, name, render, template=template)
            return render

        return decorator

    def resolve(self, theme_id: str) -> ThemeEntry:
        """Return the entry for *theme_id*, or the default entry.

        Raises:
            LookupError: If the default theme itself was never registered.
        """
        entry = self._entries.get(theme_id)
        if entry is not None:
            return entry
        try:
            return self._entries[self.default_id]
        except KeyError:
            raise LookupError(
                f"Default theme '{self.default_id}' is not registered"
            ) from None

    def __contains__(self, theme_id: object) -> bool:
        return theme_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[ThemeEntry]:
        """Registered entries in registration order."""
        return list(self._entries.values())
