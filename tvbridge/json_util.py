"""orjson helpers for dynamic trees.

orjson only holds 64-bit integers, so numbers outside that range are written
as raw fragments (exact digits) and rejected on the way in rather than read
back as lossy floats.
"""
import re
from decimal import Decimal

import orjson

from .errors import NumberRangeError

_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1

# JSON strings are matched first so digits inside them are skipped
_TOKEN = re.compile(rb'"(?:[^"\\]|\\.)*"|-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?')


def _number(n):
    if isinstance(n, Decimal):
        if not n.is_finite():
            return float(n)
        if n != n.to_integral_value():
            return orjson.Fragment(str(n))
        n = int(n)
    if _INT64_MIN <= n <= _INT64_MAX:
        return n
    return orjson.Fragment(str(n))


def _prepare(o):
    if isinstance(o, dict):
        return {k: _prepare(v) for k, v in o.items()}
    if isinstance(o, (list, tuple)):
        return [_prepare(v) for v in o]
    if isinstance(o, Decimal) or (isinstance(o, int) and not isinstance(o, bool)):
        return _number(o)
    return o


def dumps(o, *, indent=False) -> str:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(_prepare(o), option=option).decode()


def loads(s):
    raw = s.encode() if isinstance(s, str) else bytes(s)
    for m in _TOKEN.finditer(raw):
        tok = m.group()
        if tok[:1] == b'"' or b"." in tok or b"e" in tok or b"E" in tok:
            continue
        if not _INT64_MIN <= int(tok) <= _INT64_MAX:
            raise NumberRangeError(tok.decode())
    return orjson.loads(raw)
