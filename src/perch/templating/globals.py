"""Template globals for fallback-enabled elements.

Auto-registered on a kida Environment by ``register``. Lets templates
emit the same markup the ``FallbackTagHelper`` produces without a
tag-helper pass over the rendered page:

    {{ fallback_script("https://cdn.example.com/htmx.js",
                       fallback_src="/static/htmx.js",
                       fallback_test="window.htmx",
                       defer=true) }}
"""

from typing import Any

from kida import Environment
from kida.template import Markup

from perch._internal.encoding import html_encode
from perch.config import SCRIPT_FALLBACK
from perch.taghelpers.fallback import render_fallback, render_primary


def _attribute_pairs(src: str | None, attrs: dict[str, Any]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    if src is not None:
        pairs.append((SCRIPT_FALLBACK.resource_attribute, html_encode(str(src))))
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = key.rstrip("_").replace("_", "-")
        text = name if value is True else str(value)
        pairs.append((name, html_encode(text)))
    return pairs


def fallback_script(
    src: str | None = None,
    *,
    fallback_src: str = "",
    fallback_test: str = "",
    content: str = "",
    **attrs: Any,
) -> Markup:
    """Render a ``<script>`` that reloads from *fallback_src* when *fallback_test* fails.

    Keyword attributes are emitted after ``src`` in call order, with ``_``
    turned into ``-`` (``data_role`` → ``data-role``, ``async_`` → ``async``).
    ``True`` renders the attribute with its own name as value; ``None`` and
    ``False`` drop it. *content* is trusted script source and is not escaped.

    Without both *fallback_src* and *fallback_test* only the plain element is
    rendered.
    """
    pairs = _attribute_pairs(src, attrs)
    primary = render_primary(SCRIPT_FALLBACK.tag_name, pairs, content)
    if not (fallback_src and fallback_test):
        return Markup(primary)
    fallback = render_fallback(
        SCRIPT_FALLBACK.tag_name,
        pairs,
        resource_attribute=SCRIPT_FALLBACK.resource_attribute,
        fallback_resource=str(fallback_src),
        fallback_test=str(fallback_test),
    )
    return Markup(primary + fallback)


# All built-in perch globals, installed by ``register``.
BUILTIN_GLOBALS: dict[str, Any] = {
    "fallback_script": fallback_script,
}


def register(env: Environment) -> Environment:
    """Install perch's template globals on *env* and return it."""
    for name, value in BUILTIN_GLOBALS.items():
        env.add_global(name, value)
    return env
