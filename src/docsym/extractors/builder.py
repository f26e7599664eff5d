"""Symbol tree assembly with an explicit scope stack."""

from dataclasses import dataclass, field

from docsym.models.symbols import Symbol


@dataclass
class Scope:
    """An open class or module and its declared superclass."""

    symbol: Symbol
    superclass: str | None = None


@dataclass
class SymbolTreeBuilder:
    """
    Attaches symbols to the innermost open scope.

    One builder serves one extraction. Every symbol is appended to
    exactly one parent (or to the roots) and is never removed.
    """

    roots: list[Symbol] = field(default_factory=list)
    _stack: list[Scope] = field(default_factory=list)

    def current_scope(self) -> Scope | None:
        """Return the innermost open scope, if any."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        """Number of open scopes."""
        return len(self._stack)

    def attach(self, symbol: Symbol) -> None:
        """Append symbol to the current scope, or to the roots outside any scope."""
        scope = self.current_scope()
        if scope is None:
            self.roots.append(symbol)
        else:
            scope.symbol.children.append(symbol)

    def attach_leaf(self, symbol: Symbol) -> bool:
        """Append a leaf symbol; leaves outside any class or module are dropped."""
        scope = self.current_scope()
        if scope is None:
            return False
        scope.symbol.children.append(symbol)
        return True

    def push_scope(self, symbol: Symbol, superclass: str | None = None) -> None:
        """Open a scope for an already attached container symbol."""
        self._stack.append(Scope(symbol=symbol, superclass=superclass))

    def pop_scope(self) -> Symbol:
        """Close the innermost scope."""
        if not self._stack:
            raise IndexError("pop_scope() called with no open scope")
        return self._stack.pop().symbol
