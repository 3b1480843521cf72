"""Plain-text rendering of the search state for terminal output."""

from __future__ import annotations

from typing import Iterable

from poet.domain.models import Poem
from poet.services.search_controller import SearchState

SEPARATOR = "-" * 40


def render_poem(poem: Poem) -> str:
    header = [
        poem.title,
        f"by {poem.author}",
        f"({poem.linecount} lines)",
        "",
    ]
    return "\n".join(header + [poem.text]).rstrip()


def render_poems(poems: Iterable[Poem]) -> str:
    blocks = [render_poem(poem) for poem in poems]
    return f"\n{SEPARATOR}\n".join(blocks)


def render_state(state: SearchState) -> str:
    """Render whatever the view should show for ``state``."""

    if state.loading:
        return "Loading..."
    if state.error_message:
        return state.error_message
    if not state.results:
        return ""
    count = len(state.results)
    summary = f"Found {count} poem{'s' if count != 1 else ''}"
    return f"{summary}\n\n{render_poems(state.results)}"


__all__ = ["render_poem", "render_poems", "render_state"]
