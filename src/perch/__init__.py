"""Perch — tag helpers for server-rendered HTML views.

Rewrites resource-loading elements so pages fall back to a second copy
of a script when the first fails to load.

Basic usage::

    from perch import ScriptTagHelper, element

    helper = ScriptTagHelper()
    context, output = element(
        "script",
        {
            "src": "https://cdn.example.com/htmx.js",
            "asp-fallback-src": "/static/htmx.js",
            "asp-fallback-test": "window.htmx",
        },
        directives=("asp-fallback-src", "asp-fallback-test"),
    )
    await helper.process(context, output)
    html = output.content

Template usage (kida)::

    from perch.templating.globals import register
    register(env)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "SCRIPT_FALLBACK",
    "ConfigurationError",
    "Conflict",
    "ConflictResult",
    "FallbackConfig",
    "FallbackTagHelper",
    "HTTPError",
    "NullLogger",
    "Outcome",
    "PerchError",
    "Response",
    "ScriptTagHelper",
    "TagHelperAttributes",
    "TagHelperContext",
    "TagHelperOutput",
    "element",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name in ("FallbackConfig", "SCRIPT_FALLBACK"):
        from perch import config as _config

        return getattr(_config, name)

    if name in ("FallbackTagHelper", "Outcome", "ScriptTagHelper"):
        from perch.taghelpers import fallback as _fallback

        return getattr(_fallback, name)

    if name in ("TagHelperAttributes", "TagHelperContext", "TagHelperOutput", "element"):
        from perch.taghelpers import context as _ctx

        return getattr(_ctx, name)

    if name == "NullLogger":
        from perch.taghelpers.diagnostics import NullLogger

        return NullLogger

    if name in ("Response", "ConflictResult"):
        from perch.http import response as _resp

        return getattr(_resp, name)

    if name in ("PerchError", "ConfigurationError", "HTTPError", "Conflict"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
