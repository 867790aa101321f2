from . import arithmetic, logic

# Names visible to code generated by the denotational compiler
initial_bindings = {
    "add": arithmetic.add,
    "multiply": arithmetic.multiply,
    "less_than": arithmetic.less_than,
    "truth": logic.truth,
}
