"""Tag helper configuration.

FallbackConfig is a frozen dataclass — one algorithm, many element kinds.
Each fallback-capable element differs only in its tag name, the attribute
holding its resource location, and the names of the directive attributes.
"""

from dataclasses import dataclass

from perch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class FallbackConfig:
    """Describes one fallback-capable element kind. Immutable after creation.

    ::

        config = FallbackConfig(tag_name="script", resource_attribute="src")
    """

    tag_name: str = "script"
    resource_attribute: str = "src"

    # Directive attributes (consumed by the helper, never rendered)
    fallback_resource_attribute: str = "asp-fallback-src"
    fallback_test_attribute: str = "asp-fallback-test"

    def __post_init__(self) -> None:
        for name in (
            "tag_name",
            "resource_attribute",
            "fallback_resource_attribute",
            "fallback_test_attribute",
        ):
            if not getattr(self, name):
                msg = f"FallbackConfig.{name} must be a non-empty string"
                raise ConfigurationError(msg)
        if self.fallback_resource_attribute.lower() == self.fallback_test_attribute.lower():
            msg = (
                "FallbackConfig directive attributes must differ, got "
                f"{self.fallback_resource_attribute!r} twice"
            )
            raise ConfigurationError(msg)

    @property
    def required_attributes(self) -> tuple[str, str]:
        """Directive attributes that must all be present for the helper to run."""
        return (self.fallback_resource_attribute, self.fallback_test_attribute)


SCRIPT_FALLBACK = FallbackConfig(
    tag_name="script",
    resource_attribute="src",
    fallback_resource_attribute="asp-fallback-src",
    fallback_test_attribute="asp-fallback-test",
)
