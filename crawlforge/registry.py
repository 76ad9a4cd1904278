"""Maps forge names to forge kinds and adapters."""

from .errors import ParseForgeError
from .forges import ForgeAdapter, GitHubAdapter, OpenGrokAdapter
from .models import ForgeKind

FORGE_NAMES = tuple(kind.value for kind in ForgeKind)

# Adapters are stateless, one per kind for the whole process
_adapters: dict[ForgeKind, ForgeAdapter] = {
    ForgeKind.GITHUB: GitHubAdapter(),
    ForgeKind.OPENGROK: OpenGrokAdapter(),
}


def parse_forge(name: str) -> ForgeKind:
    """Parse a forge name. Matching is exact and case-sensitive."""
    for kind in ForgeKind:
        if kind.value == name:
            return kind
    raise ParseForgeError(name)


def get_adapter(kind: ForgeKind) -> ForgeAdapter:
    return _adapters[kind]
