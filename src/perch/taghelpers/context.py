"""Element descriptions handed to tag helpers.

A view renderer builds one ``TagHelperContext`` and one ``TagHelperOutput``
per source element, runs the helper, then emits whatever the output holds.
Nothing here outlives a single render invocation.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from perch._internal.encoding import html_encode
from perch._internal.types import AttributePairs, ChildContent


class TagHelperAttributes(Mapping[str, str]):
    """Ordered, case-insensitive element attributes.

    Names keep their authored spelling and position. Lookup and membership
    ignore case. ``__getitem__`` returns the first matching value.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        object.__setattr__(self, "_pairs", tuple((str(k), str(v)) for k, v in pairs))

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._pairs:
            if name.lower() == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name.lower() == key_lower for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._pairs:
            if name.lower() not in seen:
                seen.add(name.lower())
                yield name

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._pairs)
        return f"TagHelperAttributes({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def without(self, *names: str) -> TagHelperAttributes:
        """Return a copy with every attribute named in *names* removed."""
        drop = {n.lower() for n in names}
        return TagHelperAttributes(p for p in self._pairs if p[0].lower() not in drop)

    @property
    def pairs(self) -> AttributePairs:
        """All ``(name, value)`` pairs in authored order."""
        return self._pairs


async def _no_content() -> str | None:
    return None


@dataclass(frozen=True, slots=True)
class TagHelperContext:
    """Everything the renderer knows about the source element.

    ``all_attributes`` holds every authored attribute, helper directives
    included. ``get_child_content`` renders the element body on demand.
    """

    all_attributes: TagHelperAttributes = field(default_factory=TagHelperAttributes)
    unique_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    get_child_content: ChildContent = _no_content


@dataclass(slots=True)
class TagHelperOutput:
    """What the renderer will emit for the element.

    Attribute values are already HTML-encoded. A helper that takes over
    rendering sets ``tag_name`` to ``None`` and stores its markup with
    ``set_content``; the renderer then writes ``content`` verbatim.
    """

    tag_name: str | None
    attributes: TagHelperAttributes = field(default_factory=TagHelperAttributes)
    content: str = ""
    content_set: bool = False

    def set_content(self, content: str) -> None:
        self.content = content
        self.content_set = True


def element(
    tag_name: str,
    attributes: Iterable[tuple[str, str]] | Mapping[str, str] = (),
    *,
    directives: Iterable[str] = (),
    child_content: ChildContent | None = None,
    unique_id: str | None = None,
) -> tuple[TagHelperContext, TagHelperOutput]:
    """Build the context/output pair for one authored element.

    *attributes* are raw authored values. Names listed in *directives* are
    consumed by the helper and left off the output; every other attribute
    is HTML-encoded onto the output in authored order.

    Example::

        context, output = element(
            "script",
            {"src": "/app.js", "asp-fallback-src": "/local/app.js", "asp-fallback-test": "window.App"},
            directives=SCRIPT_FALLBACK.required_attributes,
        )
    """
    all_attributes = TagHelperAttributes(attributes)
    rendered = all_attributes.without(*directives)
    output = TagHelperOutput(
        tag_name=tag_name,
        attributes=TagHelperAttributes((k, html_encode(v)) for k, v in rendered.pairs),
    )
    context = TagHelperContext(
        all_attributes=all_attributes,
        unique_id=unique_id or uuid.uuid4().hex,
        get_child_content=child_content or _no_content,
    )
    return context, output
