"""Name-based lookup of freshly compiled types."""

from __future__ import annotations

from starterkit.host.compiler import SEARCH_ORDER, Compiler, TypeHandle


class TypeResolver:
    """Resolves a simple type name against the host's compilation units.

    Units are searched in order (runtime, editor, global) and the first hit
    wins.  ``None`` means the type has not been compiled yet; callers treat
    that as "try again after the next recompile", not as an error.
    """

    def __init__(self, compiler: Compiler, search_order: tuple[str, ...] = SEARCH_ORDER) -> None:
        self.compiler = compiler
        self.search_order = search_order

    def resolve_type(self, name: str) -> TypeHandle | None:
        for unit in self.search_order:
            handle = self.compiler.lookup(unit, name)
            if handle is not None:
                return handle
        return None
