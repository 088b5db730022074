"""Fallback-resource tag helper.

Rewrites an element that loads an external resource so the page retries
from a second location when a runtime test fails::

    <script src="https://cdn.example.com/jquery.js"
            asp-fallback-src="/lib/jquery.js"
            asp-fallback-test="window.jQuery"></script>

becomes::

    <script src="https://cdn.example.com/jquery.js"></script>
    <script>(window.jQuery||document.write("<script src=\\"/lib/jquery.js\\"><\\/script>"));</script>

The second element rebuilds the first inside a JavaScript string, so every
attribute it carries is escaped twice: once for HTML attribute text, then
again for the string literal handed to ``document.write``.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from perch._internal.encoding import html_encode, javascript_string_encode
from perch.config import SCRIPT_FALLBACK, FallbackConfig
from perch.taghelpers.context import TagHelperContext, TagHelperOutput
from perch.taghelpers.diagnostics import (
    TagHelperLogger,
    all_required_attributes_are_present,
    logger as default_logger,
)


class Outcome(Enum):
    """Terminal result of one ``process`` call."""

    SKIP = "skip"
    REWRITTEN = "rewritten"


def render_primary(tag_name: str, attributes: Iterable[tuple[str, str]], content: str) -> str:
    """Render the pass-through element. Attribute values are already HTML-encoded."""
    parts = [f"<{tag_name}"]
    parts.extend(f' {name}="{value}"' for name, value in attributes)
    parts.append(f">{content}</{tag_name}>\n")
    return "".join(parts)


def render_fallback(
    tag_name: str,
    attributes: Iterable[tuple[str, str]],
    *,
    resource_attribute: str,
    fallback_resource: str,
    fallback_test: str,
) -> str:
    """Render the inline script that re-emits the element from *fallback_resource*.

    The resource attribute keeps its authored position and spelling but
    takes the fallback value. Without one, it is written first.
    """
    attributes = tuple(attributes)
    resource = javascript_string_encode(html_encode(fallback_resource))
    resource_lower = resource_attribute.lower()

    parts = [f'<script>({fallback_test}||document.write("<{tag_name}']
    if not any(name.lower() == resource_lower for name, _ in attributes):
        parts.append(f' {resource_attribute}=\\"{resource}\\"')

    for name, value in attributes:
        if name.lower() == resource_lower:
            parts.append(f' {name}=\\"{resource}\\"')
        else:
            parts.append(
                f' {javascript_string_encode(name)}=\\"{javascript_string_encode(value)}\\"'
            )

    parts.append(f'><\\/{tag_name}>"));</script>')
    return "".join(parts)


class FallbackTagHelper:
    """Tag helper that adds a fallback load to a resource-carrying element.

    One instance serves any number of elements; ``process`` keeps no state
    between calls, so elements of a page may be processed concurrently.

    ::

        helper = FallbackTagHelper(SCRIPT_FALLBACK, logger=logging.getLogger("views"))
        context, output = element("script", attrs, directives=SCRIPT_FALLBACK.required_attributes)
        if await helper.process(context, output) is Outcome.REWRITTEN:
            html = output.content
    """

    __slots__ = ("config", "logger", "name")

    def __init__(
        self,
        config: FallbackConfig = SCRIPT_FALLBACK,
        *,
        logger: TagHelperLogger | None = None,
        name: str | None = None,
    ) -> None:
        self.config = config
        self.logger: TagHelperLogger = default_logger if logger is None else logger
        self.name = name or f"{config.tag_name.capitalize()}TagHelper"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, config={self.config!r})"

    async def process(self, context: TagHelperContext, output: TagHelperOutput) -> Outcome:
        """Rewrite *output* in place, or leave it untouched and return ``SKIP``.

        Errors raised while rendering child content propagate unchanged and
        leave *output* as it was.
        """
        config = self.config
        if not all_required_attributes_are_present(
            context, config.required_attributes, self.logger, helper=self.name
        ):
            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.log(
                    logging.DEBUG,
                    "Skipping processing for %s %s",
                    self.name,
                    context.unique_id,
                    extra={"unique_id": context.unique_id},
                )
            return Outcome.SKIP

        attributes = output.attributes.pairs
        fallback = render_fallback(
            config.tag_name,
            attributes,
            resource_attribute=config.resource_attribute,
            fallback_resource=context.all_attributes[config.fallback_resource_attribute],
            fallback_test=context.all_attributes[config.fallback_test_attribute],
        )
        child_content = await context.get_child_content()
        primary = render_primary(config.tag_name, attributes, child_content or "")

        # The helper owns the markup from here; the renderer must not wrap it
        output.tag_name = None
        output.set_content(primary + fallback)
        return Outcome.REWRITTEN


def ScriptTagHelper(*, logger: TagHelperLogger | None = None) -> FallbackTagHelper:  # noqa: N802
    """A ``FallbackTagHelper`` for ``<script src=...>`` elements."""
    return FallbackTagHelper(SCRIPT_FALLBACK, logger=logger, name="ScriptTagHelper")
