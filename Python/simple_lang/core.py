from dataclasses import dataclass
from typing import Optional, Union
from .syntax.ast import Node, Expr, Value
from .runtime.types import Env
from .runtime import reducer, evaluator, compiler

# ======================================
# Strategies
# ======================================

@dataclass
class RunResult:
    node: Node
    env: Env
    value: Optional[Value] = None

class Strategy:
    name = "strategy"
    def run(self, node: Node, env: Env) -> RunResult:
        raise NotImplementedError
    def set_debug(self, enabled: bool) -> bool:
        raise NotImplementedError
    def __repr__(self): return f"{type(self).__name__}()"

class SmallStep(Strategy):
    name = "small"
    def run(self, node: Node, env: Env) -> RunResult:
        final, final_env = reducer.Machine(node, env, debug=reducer.DEBUG_REDUCE).run()
        value = final if isinstance(final, Expr) else None
        return RunResult(final, final_env, value)
    def set_debug(self, enabled: bool) -> bool:
        old = reducer.DEBUG_REDUCE; reducer.DEBUG_REDUCE = enabled
        return old

class BigStep(Strategy):
    name = "big"
    def run(self, node: Node, env: Env) -> RunResult:
        if isinstance(node, Expr):
            return RunResult(node, env, evaluator.eval_expr(node, env))
        return RunResult(node, evaluator.eval_stmt(node, env))
    def set_debug(self, enabled: bool) -> bool:
        old = evaluator.DEBUG_EVAL; evaluator.DEBUG_EVAL = enabled
        return old

class Denotational(Strategy):
    name = "denotational"
    def run(self, node: Node, env: Env) -> RunResult:
        program = compiler.compile_node(node)
        result = program(env)
        if program.is_statement:
            return RunResult(node, result)
        return RunResult(node, env, result)
    def set_debug(self, enabled: bool) -> bool:
        old = compiler.DEBUG_COMPILE; compiler.DEBUG_COMPILE = enabled
        return old

STRATEGIES = {s.name: s for s in (SmallStep(), BigStep(), Denotational())}

def parse_strategy(arg: str) -> Optional[Strategy]:
    return STRATEGIES.get(arg)

# ======================================
# Configuration & entry point
# ======================================

class RunConfig:
    def __init__(self, strategy: Strategy, debug: bool = False):
        self.strategy = strategy
        self.debug = debug

    @staticmethod
    def default() -> 'RunConfig':
        return RunConfig(SmallStep())

def run_program(node: Node, env: Optional[Union[Env, dict]] = None, config: Optional[RunConfig] = None) -> RunResult:
    """Run ``node`` under the strategy chosen in ``config``."""
    config = config or RunConfig.default()
    if env is None: env = Env()
    elif not isinstance(env, Env): env = Env(env)

    if not config.debug:
        return config.strategy.run(node, env)
    previous = config.strategy.set_debug(True)
    try:
        return config.strategy.run(node, env)
    finally:
        config.strategy.set_debug(previous)
