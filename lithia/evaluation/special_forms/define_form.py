from lithia.types.object import Object
from lithia.types.nil import Nil
from lithia.types.environment import Environment
from lithia.evaluation.evaluator import evaluate
from lithia.builtin.args import split_args, symbol_name


def define_form(env: Environment, args: Object) -> Object:
    """
    (def name value)
    Binds a global. Fails with GlobalExists if `name` is already global.
    """
    name_expr, val_expr = split_args(args, 2)
    name = symbol_name(name_expr)
    value = evaluate(val_expr, env)
    env.bind(name, value, is_global=True)
    return Nil
