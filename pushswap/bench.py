"""The benchmark report written to standard error after sorting."""

from __future__ import annotations

from pushswap.parsing import Mode
from pushswap.stacks import Op, Stacks

_STRATEGY_NAMES = {
    Mode.SIMPLE: "simple (O(n^2))",
    Mode.MEDIUM: "medium (O(n√n)",
    Mode.COMPLEX: "complex (O(nlogn)",
}


def format_disorder(dis: float) -> str:
    """Disorder as a percentage with two decimals and two integer digits."""
    if dis == 1:
        body = "100%"
    else:
        scaled = int(dis * 10000)
        digits = f"{scaled % 10000:04d}"
        body = f"{digits[:2]}.{digits[2:]}"
    return f"[bench] disorder : {body}%"


def format_strategy(dis: float, mode: Mode | int) -> str:
    """The strategy used, with its complexity; adaptive names the one it picks."""
    mode = Mode(mode)
    if mode in _STRATEGY_NAMES:
        name = _STRATEGY_NAMES[mode]
    elif dis < 0.2:
        name = "adaptive (O(n))"
    elif dis < 0.5:
        name = "adaptive (O(n√n)"
    else:
        name = "adaptive (O(nlogn))"
    return f"[bench] strategy : {name}"


def format_total(stacks: Stacks) -> str:
    """The total of counted operations."""
    return f"[bench] total operations : {stacks.total_ops()}"


def format_counts(stacks: Stacks) -> str:
    """Per-operation counts on two lines; combined operations always show 0."""
    first = (
        f"[bench] sa : {stacks.count(Op.SA)} sb : {stacks.count(Op.SB)} ss : 0"
        f" pa : {stacks.count(Op.PA)} pb : {stacks.count(Op.PB)}"
    )
    second = (
        f"[bench] ra : {stacks.count(Op.RA)} rb : {stacks.count(Op.RB)} rr : 0"
        f" rra : {stacks.count(Op.RRA)} rrb : {stacks.count(Op.RRB)}"
    )
    return f"{first}\n{second}"


def report(mode: Mode | int, dis: float, stacks: Stacks) -> str:
    """The whole benchmark report, ending with a newline."""
    lines = [
        format_disorder(dis),
        format_strategy(dis, mode),
        format_total(stacks),
        format_counts(stacks),
    ]
    return "\n".join(lines) + "\n"