from . import ast
from .ast import (
    Node, Expr, Stmt, Value,
    Number, Boolean, Variable, Add, Multiply, LessThan,
    DoNothing, Assign, If, Sequence, While,
    is_value, to_display,
)

__all__ = [
    "ast",
    "Node", "Expr", "Stmt", "Value",
    "Number", "Boolean", "Variable", "Add", "Multiply", "LessThan",
    "DoNothing", "Assign", "If", "Sequence", "While",
    "is_value", "to_display",
]
