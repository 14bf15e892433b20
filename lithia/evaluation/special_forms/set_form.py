from lithia.types.object import Object
from lithia.types.nil import Nil
from lithia.types.environment import Environment
from lithia.evaluation.evaluator import evaluate
from lithia.builtin.args import split_args, symbol_name


def set_form(env: Environment, args: Object) -> Object:
    """(= name value): update the nearest binding, or create a local one."""
    name_expr, val_expr = split_args(args, 2)
    name = symbol_name(name_expr)
    value = evaluate(val_expr, env)
    env.assign(name, value)
    return Nil
