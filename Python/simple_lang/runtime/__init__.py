from .types import (
    Env, SimpleError, UnboundVariable, TypeMismatch, InvalidCondition, IrreducibleNode,
)
from .reducer import is_reducible, reduce, Machine
from .evaluator import evaluate
from .compiler import compile_node, to_python, Denotation

__all__ = [
    "Env", "SimpleError", "UnboundVariable", "TypeMismatch", "InvalidCondition", "IrreducibleNode",
    "is_reducible", "reduce", "Machine",
    "evaluate",
    "compile_node", "to_python", "Denotation",
]
