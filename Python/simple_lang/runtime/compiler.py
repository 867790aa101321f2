"""Denotational semantics: SIMPLE trees become Python functions.

Every node is translated into one Python function of an environment ``e``.
Compound nodes call the functions of their children by name, so the whole
program is a small module of functions that Python compiles once; running
the program is then a plain call into that module.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Union
from ..syntax.ast import (
    Node, Stmt, Value, Number, Boolean, Variable, Add, Multiply, LessThan,
    DoNothing, Assign, If, Sequence, While,
)
from ..prelude import initial_bindings
from .types import Env

DEBUG_COMPILE = False

def log(msg: str):
    if DEBUG_COMPILE:
        print(f"[COMPILE] {msg}")

OPERATOR_FUNCS = {Add: "add", Multiply: "multiply", LessThan: "less_than"}

class CodeGen:
    def __init__(self):
        self.functions: List[str] = []

    def fresh(self) -> str:
        return f"_n{len(self.functions)}"

    def define(self, body: List[str]) -> str:
        name = self.fresh()
        lines = [f"def {name}(e):"] + [f"    {line}" for line in body]
        self.functions.append("\n".join(lines))
        return name

    def emit(self, node: Node) -> str:
        """Emit the function for ``node`` (children first) and return its name."""
        if isinstance(node, Number):
            return self.define([f"return Number({node.value!r})"])
        if isinstance(node, Boolean):
            return self.define([f"return Boolean({node.value!r})"])
        if isinstance(node, Variable):
            return self.define([f"return e.lookup({node.name!r})"])
        if isinstance(node, (Add, Multiply, LessThan)):
            left = self.emit(node.left); right = self.emit(node.right)
            return self.define([f"return {OPERATOR_FUNCS[type(node)]}({left}(e), {right}(e))"])
        if isinstance(node, DoNothing):
            return self.define(["return e"])
        if isinstance(node, Assign):
            expr = self.emit(node.expression)
            return self.define([f"return e.bind({node.name!r}, {expr}(e))"])
        if isinstance(node, If):
            cond = self.emit(node.condition)
            cons = self.emit(node.consequence); alt = self.emit(node.alternative)
            return self.define([
                f"if truth({cond}(e)):",
                f"    return {cons}(e)",
                f"return {alt}(e)",
            ])
        if isinstance(node, Sequence):
            first = self.emit(node.first); second = self.emit(node.second)
            return self.define([f"return {second}({first}(e))"])
        if isinstance(node, While):
            cond = self.emit(node.condition); body = self.emit(node.body)
            return self.define([
                f"while truth({cond}(e)):",
                f"    e = {body}(e)",
                "return e",
            ])
        raise TypeError(f"Unknown node: {type(node).__name__}")

def to_python(node: Node) -> str:
    gen = CodeGen()
    root = gen.emit(node)
    return "\n\n".join(gen.functions) + f"\n\nprogram = {root}\n"

def runtime_namespace() -> Dict[str, Any]:
    ns: Dict[str, Any] = {"Number": Number, "Boolean": Boolean}
    ns.update(initial_bindings)
    return ns

@dataclass(frozen=True)
class Denotation:
    """A compiled program: call it with an ``Env``.

    Expressions produce a value node, statements produce a new ``Env``.
    """
    source: str
    fn: Callable[[Env], Union[Value, Env]] = field(repr=False)
    is_statement: bool = False

    def __call__(self, env: Env) -> Union[Value, Env]:
        return self.fn(env)

    def __str__(self): return self.source

def compile_node(node: Node) -> Denotation:
    source = to_python(node)
    if DEBUG_COMPILE: log(f"generated source for {node}:\n{source}")
    code = compile(source, "<simple>", "exec")
    ns = runtime_namespace()
    exec(code, ns)
    return Denotation(source, ns["program"], isinstance(node, Stmt))
