from lithia.types.object import Object
from lithia.types.nil import Nil
from lithia.types.environment import Environment
from lithia.evaluation.evaluator import evaluate, evaluate_sequence
from lithia.builtin.args import split_rest


def while_form(env: Environment, args: Object) -> Object:
    """
    (while cond body...)
    The whole loop runs in one local frame, so locals created by the body
    persist across iterations but not past the loop. Always returns Nil.
    """
    cond, *body = split_rest(args, 1)

    with env.scope():
        while evaluate(cond, env) is not Nil:
            evaluate_sequence(body, env)
    return Nil
