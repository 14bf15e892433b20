from lithia.types.object import Object
from lithia.types.environment import Environment
from lithia.evaluation.evaluator import evaluate, evaluate_sequence
from lithia.builtin.args import split_args, split_rest


def quote_form(env: Environment, args: Object) -> Object:
    """(quote x) -> x, unevaluated."""
    (datum,) = split_args(args, 1)
    return datum


def eval_form(env: Environment, args: Object) -> Object:
    """
    (eval a b ...)
    Every argument is evaluated, then the results are evaluated again in
    order; the value of the last one is returned.
    """
    exprs = split_rest(args, 1)
    values = [evaluate(e, env) for e in exprs]
    return evaluate_sequence(values, env)
