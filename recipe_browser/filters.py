import re
from dataclasses import dataclass
from typing import Optional

# Operator prefix is optional; no whitespace allowed before the number
OP_FILTER_RE = re.compile(r"(<=|>=|=|<|>)?([0-9]+(?:\.[0-9]+)?)")


@dataclass(frozen=True)
class ParsedComparison:
    op: str
    value: float


def parse_op_filter(raw: Optional[str]) -> Optional[ParsedComparison]:
    """Parse filters like ``<=400``, ``>=4.5``, ``=30`` or ``120``.

    A missing operator means equality. Anything that is not a whole-string
    match returns None so the field is simply left unfiltered.
    """
    if not raw:
        return None
    m = OP_FILTER_RE.fullmatch(raw)
    if not m:
        return None
    return ParsedComparison(op=m.group(1) or "=", value=float(m.group(2)))
