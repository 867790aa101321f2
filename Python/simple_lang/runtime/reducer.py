from typing import Iterator, Tuple, Union
from ..syntax.ast import (
    Node, Expr, Stmt, Number, Boolean, Variable, Add, Multiply, LessThan,
    DoNothing, Assign, If, Sequence, While,
)
from ..prelude import arithmetic, logic
from .types import Env, IrreducibleNode

DEBUG_REDUCE = False

def log(msg: str):
    if DEBUG_REDUCE:
        print(f"[REDUCE] {msg}")

# ======================================
# Reducibility
# ======================================

def is_reducible(node: Node) -> bool:
    if isinstance(node, (Number, Boolean, DoNothing)): return False
    if isinstance(node, (Variable, Add, Multiply, LessThan, Assign, If, Sequence, While)): return True
    raise TypeError(f"Unknown node: {type(node).__name__}")

# ======================================
# One-step rewriting
# ======================================

def reduce_expr(expr: Expr, env: Env) -> Expr:
    if DEBUG_REDUCE: log(f"reduce_expr: {expr}")
    if isinstance(expr, (Number, Boolean)):
        raise IrreducibleNode(expr)
    if isinstance(expr, Variable):
        return env.lookup(expr.name)
    if isinstance(expr, (Add, Multiply, LessThan)):
        if is_reducible(expr.left):
            return type(expr)(reduce_expr(expr.left, env), expr.right)
        if is_reducible(expr.right):
            return type(expr)(expr.left, reduce_expr(expr.right, env))
        return arithmetic.operators[type(expr)](expr.left, expr.right)
    raise TypeError(f"Unknown expression: {type(expr).__name__}")

def reduce_stmt(stmt: Stmt, env: Env) -> Tuple[Stmt, Env]:
    if DEBUG_REDUCE: log(f"reduce_stmt: {stmt} in {env}")
    if isinstance(stmt, DoNothing):
        raise IrreducibleNode(stmt)
    if isinstance(stmt, Assign):
        if is_reducible(stmt.expression):
            return Assign(stmt.name, reduce_expr(stmt.expression, env)), env
        return DoNothing(), env.bind(stmt.name, stmt.expression)
    if isinstance(stmt, If):
        if is_reducible(stmt.condition):
            return If(reduce_expr(stmt.condition, env), stmt.consequence, stmt.alternative), env
        if logic.truth(stmt.condition):
            return stmt.consequence, env
        return stmt.alternative, env
    if isinstance(stmt, Sequence):
        if stmt.first == DoNothing():
            return stmt.second, env
        first, env1 = reduce_stmt(stmt.first, env)
        return Sequence(first, stmt.second), env1
    if isinstance(stmt, While):
        return If(stmt.condition, Sequence(stmt.body, stmt), DoNothing()), env
    raise TypeError(f"Unknown statement: {type(stmt).__name__}")

def reduce(node: Node, env: Env) -> Union[Expr, Tuple[Stmt, Env]]:
    """Rewrite ``node`` once.

    Expressions yield the rewritten expression; statements yield a
    ``(statement, env)`` pair since only they can change the environment.
    """
    if isinstance(node, Expr): return reduce_expr(node, env)
    if isinstance(node, Stmt): return reduce_stmt(node, env)
    raise TypeError(f"Unknown node: {type(node).__name__}")

# ======================================
# Machine
# ======================================

class Machine:
    """Drives ``reduce`` until the current node is in normal form.

    There is no step limit: a program that loops forever keeps the machine
    running. Use ``steps()`` to observe or bound a run from outside.
    """

    def __init__(self, node: Node, env: Env = Env(), debug: bool = False):
        self.node = node
        self.env = env
        self.debug = debug
        self.step_count = 0

    def log(self, msg: str):
        if self.debug:
            print(f"[STEP] {msg}")

    def step(self):
        if isinstance(self.node, Stmt):
            self.node, self.env = reduce_stmt(self.node, self.env)
        else:
            self.node = reduce_expr(self.node, self.env)
        self.step_count += 1

    def steps(self) -> Iterator[Tuple[Node, Env]]:
        yield self.node, self.env
        while is_reducible(self.node):
            self.step()
            yield self.node, self.env

    def run(self) -> Tuple[Node, Env]:
        for node, env in self.steps():
            if self.debug: self.log(f"{self.step_count}: {node}, {env}")
        return self.node, self.env
