from lithia.types.object import Object
from lithia.types.nil import Nil
from lithia.types.environment import Environment
from lithia.evaluation.evaluator import evaluate
from lithia.builtin.args import split_args


def if_form(env: Environment, args: Object) -> Object:
    """(if cond then [else]); bindings made while it runs are dropped afterwards."""
    cond, then_expr, *else_expr = split_args(args, 2, 1)

    with env.scope():
        # Anything but Nil is true
        if evaluate(cond, env) is not Nil:
            return evaluate(then_expr, env)
        if else_expr:
            return evaluate(else_expr[0], env)
        return Nil
