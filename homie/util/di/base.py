"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Swappable infrastructure: hosted API, hub + chain, image host,
# preferences server, curated-list database
Component = Literal["neynar", "farcaster", "imgbb", "curation", "persistence"]

COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    Infrastructure components subclass this once as an abstract marker
    (e.g. ``NeynarProvider``) and then twice more for the production and
    mock implementations. Core providers subclass it directly and are never
    swapped.

    Attributes:
        __mock_component__: Component name, None for core providers
        __is_mock__: Whether this is a mock implementation
        __depends_on__: Components that must also be real when this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()

    @classmethod
    def unmet_dependencies(cls, real: set[Component]) -> frozenset[Component]:
        """Components this one needs real that are still mocked."""
        return cls.__depends_on__ - real
