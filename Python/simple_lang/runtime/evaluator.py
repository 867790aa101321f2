from typing import Union
from ..syntax.ast import (
    Node, Expr, Stmt, Value, Number, Boolean, Variable, Add, Multiply, LessThan,
    DoNothing, Assign, If, Sequence, While,
)
from ..prelude import arithmetic, logic
from .types import Env

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

def eval_expr(expr: Expr, env: Env) -> Value:
    if isinstance(expr, (Number, Boolean)): return expr
    if isinstance(expr, Variable): return env.lookup(expr.name)
    if isinstance(expr, (Add, Multiply, LessThan)):
        left = eval_expr(expr.left, env)
        right = eval_expr(expr.right, env)
        return arithmetic.operators[type(expr)](left, right)
    raise TypeError(f"Unknown expression: {type(expr).__name__}")

def eval_stmt(stmt: Stmt, env: Env) -> Env:
    if DEBUG_EVAL: log(f"eval_stmt: {stmt} in {env}")
    if isinstance(stmt, DoNothing): return env
    if isinstance(stmt, Assign):
        return env.bind(stmt.name, eval_expr(stmt.expression, env))
    if isinstance(stmt, If):
        if logic.truth(eval_expr(stmt.condition, env)):
            return eval_stmt(stmt.consequence, env)
        return eval_stmt(stmt.alternative, env)
    if isinstance(stmt, Sequence):
        return eval_stmt(stmt.second, eval_stmt(stmt.first, env))
    if isinstance(stmt, While):
        # Iterate instead of recursing on the same While node
        while logic.truth(eval_expr(stmt.condition, env)):
            env = eval_stmt(stmt.body, env)
        return env
    raise TypeError(f"Unknown statement: {type(stmt).__name__}")

def evaluate(node: Node, env: Env) -> Union[Value, Env]:
    """Big-step semantics: an expression's value, or a statement's final env."""
    if isinstance(node, Expr): return eval_expr(node, env)
    if isinstance(node, Stmt): return eval_stmt(node, env)
    raise TypeError(f"Unknown node: {type(node).__name__}")
