from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from ...constants import Defaults

if TYPE_CHECKING:
    from .node_variant import DimensionCombination


@dataclass(frozen=True, slots=True)
class ReadScope:
    """Privileges a store read is performed with.

    Export is an administrative operation, so selection reads with an
    elevated scope that skips authorization checks. A non-elevated scope only
    sees records whose access roles intersect ``roles``.
    """

    bypass_authorization: bool = False
    roles: frozenset[str] = frozenset()

    @classmethod
    def elevated(cls) -> ReadScope:
        return cls(bypass_authorization=True)

    @classmethod
    def for_roles(cls, *roles: str) -> ReadScope:
        return cls(roles=frozenset(roles))

    def may_read(self, access_roles: tuple[str, ...]) -> bool:
        if self.bypass_authorization or not access_roles:
            return True
        return not self.roles.isdisjoint(access_roles)


@dataclass(frozen=True, slots=True)
class NodeContext:
    workspace: str = Defaults.WORKSPACE
    dimensions: DimensionCombination = field(default_factory=dict)
    invisible_content_shown: bool = False
    removed_content_shown: bool = False
    inaccessible_content_shown: bool = False
    scope: ReadScope = field(default_factory=ReadScope)

    def with_dimensions(self, dimensions: DimensionCombination) -> NodeContext:
        return replace(self, dimensions=dimensions)

    def showing_invisible_content(self) -> NodeContext:
        return replace(self, invisible_content_shown=True)
