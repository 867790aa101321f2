from typing import Callable, Dict
from ..syntax.ast import Node, Number, Boolean, Value, Add, Multiply, LessThan
from ..runtime.types import TypeMismatch

def is_integer(node: Node) -> bool:
    return isinstance(node, Number) and isinstance(node.value, int) and not isinstance(node.value, bool)

def eval_arithmetic(op: str, left: Node, right: Node) -> Value:
    if not (is_integer(left) and is_integer(right)):
        raise TypeMismatch(f"Cannot apply {op} to {left!r} and {right!r}", op, (left, right))
    return eval_int_op(op, left.value, right.value)

def eval_int_op(op: str, va: int, vb: int) -> Value:
    if op == "+": return Number(va + vb)
    if op == "*": return Number(va * vb)
    if op == "<": return Boolean(va < vb)
    raise RuntimeError(f"Unknown int op: {op}")

def add(left: Node, right: Node) -> Value: return eval_arithmetic("+", left, right)
def multiply(left: Node, right: Node) -> Value: return eval_arithmetic("*", left, right)
def less_than(left: Node, right: Node) -> Value: return eval_arithmetic("<", left, right)

operators: Dict[type, Callable[[Node, Node], Value]] = {
    Add: add,
    Multiply: multiply,
    LessThan: less_than,
}
