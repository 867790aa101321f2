from .syntax import (
    Node, Expr, Stmt,
    Number, Boolean, Variable, Add, Multiply, LessThan,
    DoNothing, Assign, If, Sequence, While,
    is_value, to_display,
)
from .runtime import (
    Env, SimpleError, UnboundVariable, TypeMismatch, InvalidCondition, IrreducibleNode,
    is_reducible, reduce, Machine, evaluate, compile_node, to_python, Denotation,
)
from .core import run_program, RunConfig, RunResult, Strategy, SmallStep, BigStep, Denotational, parse_strategy

__all__ = [
    "Node", "Expr", "Stmt",
    "Number", "Boolean", "Variable", "Add", "Multiply", "LessThan",
    "DoNothing", "Assign", "If", "Sequence", "While",
    "is_value", "to_display",
    "Env", "SimpleError", "UnboundVariable", "TypeMismatch", "InvalidCondition", "IrreducibleNode",
    "is_reducible", "reduce", "Machine", "evaluate", "compile_node", "to_python", "Denotation",
    "run_program", "RunConfig", "RunResult", "Strategy", "SmallStep", "BigStep", "Denotational",
    "parse_strategy",
]
