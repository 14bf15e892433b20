from lithia.types.object import Object, Number, Character, Quoted, Opaque
from lithia.types.nil import Nil, T, NilType, TrueType, truth
from lithia.types.symbol import Symbol
from lithia.types.pair import Pair, iter_list, is_string, string_to_list, list_to_string
from lithia.types.lambda_fn import LispFunc
from lithia.types.native_fn import NativeFunc, NativeFn
from lithia.types.environment import Environment, GlobalTable

__all__ = [
    "Object",
    "Nil",
    "T",
    "NilType",
    "TrueType",
    "truth",
    "Pair",
    "Symbol",
    "Number",
    "Character",
    "Quoted",
    "LispFunc",
    "NativeFunc",
    "NativeFn",
    "Opaque",
    "Environment",
    "GlobalTable",
    "iter_list",
    "is_string",
    "string_to_list",
    "list_to_string",
]
