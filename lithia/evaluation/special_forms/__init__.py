"""Control-flow and binding forms for lithia.

These are ordinary NativeFunc builtins: because a builtin receives its
arguments unevaluated, `if`, `while`, `quote`, `func` and the binders need
no separate dispatch in the evaluator. This table maps each name to its
handler; `register` installs them into the global table.
"""

from lithia.types.environment import Environment
from lithia.types.native_fn import NativeFunc
from lithia.evaluation.special_forms.quote_forms import quote_form, eval_form
from lithia.evaluation.special_forms.if_form import if_form
from lithia.evaluation.special_forms.while_form import while_form
from lithia.evaluation.special_forms.func_forms import func_form, defunc_form
from lithia.evaluation.special_forms.define_form import define_form
from lithia.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "eval": eval_form,
    "while": while_form,
    "if": if_form,
    "func": func_form,
    "defunc": defunc_form,
    "def": define_form,
    "=": set_form,
    "set": set_form,
}


def register(env: Environment) -> None:
    for name, form in SPECIAL_FORMS.items():
        env.bind(name, NativeFunc(form), is_global=True)
