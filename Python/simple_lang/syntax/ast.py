from dataclasses import dataclass
from typing import Union

# ======================================
# AST Nodes
# ======================================

class Node:
    def __str__(self): return to_display(self)
    def __repr__(self): return f"«{to_display(self)}»"

class Expr(Node): pass

class Stmt(Node): pass

@dataclass(frozen=True, repr=False)
class Number(Expr):
    value: int

@dataclass(frozen=True, repr=False)
class Boolean(Expr):
    value: bool

@dataclass(frozen=True, repr=False)
class Variable(Expr):
    name: str

@dataclass(frozen=True, repr=False)
class Add(Expr):
    left: Expr
    right: Expr

@dataclass(frozen=True, repr=False)
class Multiply(Expr):
    left: Expr
    right: Expr

@dataclass(frozen=True, repr=False)
class LessThan(Expr):
    left: Expr
    right: Expr

# Statements

@dataclass(frozen=True, repr=False)
class DoNothing(Stmt):
    pass

@dataclass(frozen=True, repr=False)
class Assign(Stmt):
    name: str
    expression: Expr

@dataclass(frozen=True, repr=False)
class If(Stmt):
    condition: Expr
    consequence: Stmt
    alternative: Stmt

@dataclass(frozen=True, repr=False)
class Sequence(Stmt):
    first: Stmt
    second: Stmt

@dataclass(frozen=True, repr=False)
class While(Stmt):
    condition: Expr
    body: Stmt

Value = Union[Number, Boolean]

BINARY_SYMBOLS = {Add: "+", Multiply: "*", LessThan: "<"}

def is_value(node: Node) -> bool:
    return isinstance(node, (Number, Boolean))

def to_display(node: Node) -> str:
    """Render a node in SIMPLE surface syntax."""
    if isinstance(node, Number): return str(node.value)
    if isinstance(node, Boolean): return "true" if node.value else "false"
    if isinstance(node, Variable): return node.name
    if isinstance(node, (Add, Multiply, LessThan)):
        return f"{to_display(node.left)} {BINARY_SYMBOLS[type(node)]} {to_display(node.right)}"
    if isinstance(node, DoNothing): return "do-nothing"
    if isinstance(node, Assign): return f"{node.name} = {to_display(node.expression)}"
    if isinstance(node, If):
        return (f"if ({to_display(node.condition)}) {{ {to_display(node.consequence)} }}"
                f" else {{ {to_display(node.alternative)} }}")
    if isinstance(node, Sequence): return f"{to_display(node.first)}; {to_display(node.second)};"
    if isinstance(node, While):
        return f"while ({to_display(node.condition)}) {{ {to_display(node.body)} }}"
    raise TypeError(f"Unknown node: {type(node).__name__}")
