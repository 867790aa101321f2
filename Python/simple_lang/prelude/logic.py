from ..syntax.ast import Node, Boolean
from ..runtime.types import InvalidCondition

def truth(condition: Node) -> bool:
    """Extract the Python bool behind an ``If``/``While`` condition value."""
    if not (isinstance(condition, Boolean) and isinstance(condition.value, bool)):
        raise InvalidCondition(condition)
    return condition.value
