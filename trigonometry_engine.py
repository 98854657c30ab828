from typing import List, Optional, Tuple

import sympy as sp

from trig_series import cosine, cosine_no_radian_arg, sine, sine_no_radian_arg
from utils.precision_manager import check_tolerance, get_tolerance
from utils.trace_helpers import add_traceback


class TrigonometryEngine:
    """Handles textual sin/cos calls on top of the series functions. Degree forms are sind/cosd."""

    def __init__(self, tolerance: Optional[float] = None):
        # None follows the global tolerance, even after set_tolerance()
        self._tolerance = None if tolerance is None else check_tolerance(tolerance)
        self.traceback_info: List[dict] = []
        self.history: List[Tuple[str, float]] = []

    @property
    def tolerance(self) -> float:
        return get_tolerance() if self._tolerance is None else self._tolerance

    # -------------------------------------------------------------- #
    # Trace helper
    # -------------------------------------------------------------- #
    def _add_traceback(self, step: str, info: str):
        add_traceback(self, step, info)

    # -------------------------------------------------------------- #
    # Direct calls
    # -------------------------------------------------------------- #
    def _run(self, tag: str, fn, x) -> float:
        self._add_traceback(tag, f'{tag}({x})')
        result = fn(x, self.tolerance, trace=self.traceback_info)
        self._add_traceback(tag, f'Result = {result}')
        return result

    def sin(self, x):      return self._run('sin',  sine,                 x)
    def cos(self, x):      return self._run('cos',  cosine,               x)
    def sind(self, x):     return self._run('sind', sine_no_radian_arg,   x)
    def cosd(self, x):     return self._run('cosd', cosine_no_radian_arg, x)

    # -------------------------------------------------------------- #
    # compute() entry - recognise textual functions
    # -------------------------------------------------------------- #
    @staticmethod
    def _evaluate_argument(arg_str: str) -> float:
        """
        Evaluate an argument such as 'pi/4' or '-855' to a float.

        Only constants and arithmetic are accepted; function calls would be
        evaluated by SymPy instead of the series.
        """
        if not arg_str:
            raise ValueError("Empty argument")
        try:
            parsed = sp.sympify(arg_str)
        except sp.SympifyError as e:
            raise ValueError(f"Cannot evaluate argument: {arg_str}") from e

        if not isinstance(parsed, sp.Basic) or parsed.has(sp.Function) or not parsed.is_number:
            raise ValueError(f"Cannot evaluate argument: {arg_str} (only constants and arithmetic)")
        try:
            return float(parsed.evalf())
        except TypeError as e:
            # complex values such as I or zoo
            raise ValueError(f"Cannot evaluate argument: {arg_str} (not a real number)") from e

    def compute(self, expr: str) -> float:
        """Route 'sin(...)', 'cos(...)', 'sind(...)' or 'cosd(...)' to the series functions."""
        self._add_traceback('compute', f'Processing: {expr}')
        expr_str = str(expr).strip()

        try:
            if '(' in expr_str and expr_str.endswith(')'):
                func_name = expr_str[:expr_str.index('(')].strip()
                arg = self._evaluate_argument(expr_str[expr_str.index('(') + 1:-1].strip())

                if func_name == 'sin':
                    result = self.sin(arg)
                elif func_name == 'cos':
                    result = self.cos(arg)
                elif func_name == 'sind':
                    result = self.sind(arg)
                elif func_name == 'cosd':
                    result = self.cosd(arg)
                else:
                    raise ValueError(f"Unknown trig function: {func_name}")
            else:
                # not a function call, plain numeric value
                result = self._evaluate_argument(expr_str)
        except (ValueError, TypeError) as e:
            self._add_traceback('compute_error', str(e))
            raise

        self.history.append((expr_str, result))
        return result
