"""Tests for perch.templating.globals — the fallback_script template global."""

from kida import Environment

from perch.templating.globals import BUILTIN_GLOBALS, fallback_script, register


def _make_env() -> Environment:
    return register(Environment(autoescape=True))


class TestFallbackScript:
    def test_renders_primary_and_fallback(self) -> None:
        result = fallback_script("/cdn/a.js", fallback_src="/lib/a.js", fallback_test="window.A")
        assert str(result) == (
            '<script src="/cdn/a.js"></script>\n'
            r'<script>(window.A||document.write("<script src=\"/lib/a.js\"><\/script>"));</script>'
        )

    def test_returns_markup(self) -> None:
        result = fallback_script("/a.js", fallback_src="/b.js", fallback_test="t()")
        assert hasattr(result, "__html__")

    def test_without_directive_renders_plain_element(self) -> None:
        assert str(fallback_script("/a.js")) == '<script src="/a.js"></script>\n'
        assert str(fallback_script("/a.js", fallback_src="/b.js")) == '<script src="/a.js"></script>\n'

    def test_keyword_attributes(self) -> None:
        result = str(
            fallback_script(
                "/a.js",
                fallback_src="/b.js",
                fallback_test="t()",
                data_role="main",
                defer=True,
                async_=False,
                nonce=None,
            )
        )
        assert result.startswith('<script src="/a.js" data-role="main" defer="defer"></script>\n')
        assert r'<script src=\"/b.js\" data-role=\"main\" defer=\"defer\">' in result
        assert "async" not in result
        assert "nonce" not in result

    def test_raw_values_are_escaped(self) -> None:
        result = str(fallback_script('/a.js?x="1"', fallback_src="/b.js", fallback_test="t()"))
        assert 'src="/a.js?x=&quot;1&quot;"' in result

    def test_src_inserted_first_when_omitted(self) -> None:
        result = str(fallback_script(fallback_src="/b.js", fallback_test="t()", type="module"))
        assert result.startswith('<script type="module"></script>\n')
        assert r'document.write("<script src=\"/b.js\" type=\"module\">' in result


class TestRegistration:
    def test_builtin_globals(self) -> None:
        assert BUILTIN_GLOBALS["fallback_script"] is fallback_script

    def test_renders_from_template_unescaped(self) -> None:
        env = _make_env()
        tpl = env.from_string(
            '{{ fallback_script("/cdn/a.js", fallback_src="/lib/a.js", fallback_test="window.A") }}'
        )
        rendered = tpl.render({})
        assert '<script src="/cdn/a.js"></script>' in rendered
        assert "&lt;script" not in rendered
        assert "window.A||document.write(" in rendered
