from typing import Dict, Iterator, Optional, Tuple, Any
from ..syntax import ast

# ======================================
# Errors
# ======================================

class SimpleError(Exception): pass

class UnboundVariable(SimpleError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name
    def __str__(self): return f"Unbound variable: {self.name}"

class TypeMismatch(SimpleError, TypeError):
    def __init__(self, message: str, operator: Optional[str] = None, operands: Tuple[Any, ...] = ()):
        super().__init__(message)
        self.operator = operator
        self.operands = operands

class InvalidCondition(TypeMismatch):
    def __init__(self, value: Any):
        super().__init__(f"Condition must be a boolean, got {value}", "condition", (value,))
        self.value = value

class IrreducibleNode(SimpleError):
    def __init__(self, node: ast.Node):
        super().__init__(f"Cannot reduce {node}")
        self.node = node

# ======================================
# Environment
# ======================================

class Env:
    """Immutable mapping from variable names to value nodes.

    ``bind`` copies the bindings and returns a new ``Env``; the receiver is
    left untouched, so earlier snapshots stay valid.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Dict[str, ast.Value]] = None):
        checked: Dict[str, ast.Value] = {}
        for name, val in (values or {}).items():
            checked[name] = _check_value(name, val)
        object.__setattr__(self, "_values", checked)

    def __setattr__(self, key, value):
        raise AttributeError("Env is immutable")

    def lookup(self, name: str) -> ast.Value:
        try: return self._values[name]
        except KeyError: raise UnboundVariable(name) from None

    def bind(self, name: str, val: ast.Value) -> 'Env':
        nv = self._values.copy(); nv[name] = _check_value(name, val)
        return Env._from_checked(nv)

    def __contains__(self, name: object) -> bool: return name in self._values
    def __getitem__(self, name: str) -> ast.Value: return self.lookup(name)
    def __iter__(self) -> Iterator[str]: return iter(self._values)
    def __len__(self) -> int: return len(self._values)

    def __eq__(self, other: Any):
        return isinstance(other, Env) and self._values == other._values
    def __hash__(self): return hash(frozenset(self._values.items()))

    def __str__(self):
        return "{" + ", ".join(f"{k}: {v}" for k, v in self._values.items()) + "}"
    def __repr__(self): return f"Env({self})"

    @staticmethod
    def _from_checked(values: Dict[str, ast.Value]) -> 'Env':
        env = Env.__new__(Env)
        object.__setattr__(env, "_values", values)
        return env

def _check_value(name: str, val: Any) -> ast.Value:
    if not ast.is_value(val):
        raise TypeMismatch(f"Cannot bind {name} to non-value {val!r}", "bind", (val,))
    return val
