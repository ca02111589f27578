import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TextIO


@dataclass
class BuiltinFunction:
    name: str
    fn: Callable[[List[str]], Any]

    def __call__(self, args: List[str]) -> Any:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


PRINTLN = 'println'
BUILTIN_NAMES = frozenset({PRINTLN})


def make_builtins(out: Optional[TextIO] = None) -> Dict[str, BuiltinFunction]:
    """Create the built-in functions, writing program output to ``out``.

    ``out`` defaults to whatever ``sys.stdout`` is when a built-in runs, so
    that output capture set up after construction still sees it.
    """
    def std_println(args: List[str]) -> None:
        print(' '.join(args), file=out if out is not None else sys.stdout)

    return {
        PRINTLN: BuiltinFunction(PRINTLN, std_println),
    }
