from lithia.errors import ArgumentsError, InvalidArguments
from lithia.types.object import Object
from lithia.types.nil import Nil, NilType
from lithia.types.pair import Pair, iter_list
from lithia.types.lambda_fn import LispFunc
from lithia.types.environment import Environment
from lithia.builtin.args import split_rest, symbol_name, wrong_type


def func_form(env: Environment, args: Object) -> LispFunc:
    """
    (func (params...) body...)
    Parameters must be symbols. The body is kept unevaluated.
    """
    params_expr, *body = split_rest(args, 1)
    if not isinstance(params_expr, (Pair, NilType)):
        raise wrong_type()
    params = [symbol_name(p) for p in iter_list(params_expr)]
    return LispFunc(params, body)


def defunc_form(env: Environment, args: Object) -> Object:
    """(defunc name (params...) body...) binds a new global function."""
    if not isinstance(args, Pair):
        raise InvalidArguments(
            ArgumentsError.NOT_ENOUGH if args is Nil else ArgumentsError.DOTTED_PAIR
        )
    function = func_form(env, args.tail)
    env.bind(symbol_name(args.head), function, is_global=True)
    return Nil
