"""Command-line interface: **tvbridge check / roundtrip / bench**"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from .decoder import ValueDecoder
from .encoder import ValueEncoder
from .errors import BridgeError
from .json_util import dumps, loads
from .typespec import load_type
from .types import ListType, Number, ObjectType

# -----------------------------------------------------------------------------
# Helper I/O
# -----------------------------------------------------------------------------

def _load_json(path: Path):
    return loads(path.read_bytes())


def _dump_json(obj, path: Path):
    path.write_text(dumps(obj), encoding="utf-8")


def _encoder(ns) -> ValueEncoder:
    return ValueEncoder(missing_attributes=ns.missing, extra_attributes=ns.extra)


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_check(ns) -> int:
    typ = load_type(ns.type)
    try:
        data = _load_json(ns.input)
        _encoder(ns).encode(data, typ)
    except BridgeError as e:
        print(f"✗ {ns.input} does not match {typ}: {e}")
        return 1
    print(f"✓ {ns.input} matches {typ}")
    return 0


def cmd_roundtrip(ns) -> int:
    typ = load_type(ns.type)
    try:
        data = _load_json(ns.input)
    except BridgeError as e:
        print(f"✗ cannot read {ns.input}: {e}")
        return 1

    t0 = time.perf_counter()
    try:
        tv = _encoder(ns).encode(data, typ)
        out = ValueDecoder().decode(tv)
    except BridgeError as e:
        print(f"✗ round-trip failed: {e}")
        return 1
    ms = (time.perf_counter() - t0) * 1000

    print(f"✓ round-trip in {ms:.2f} ms → {ns.output}")
    _dump_json(out, ns.output)
    return 0


def cmd_bench(ns) -> int:
    """Benchmark encode → decode on a synthetic record list."""
    from random import randint

    typ = ListType(ObjectType({"x": Number, "y": ListType(Number)}))
    data = [
        {"x": randint(0, 9), "y": [randint(0, 9) for _ in range(5)]}
        for _ in range(ns.n)
    ]
    enc, dec = ValueEncoder(), ValueDecoder()

    steps = ["encode", "decode"]
    if ns.progress:
        from tqdm import tqdm
        steps = tqdm(steps, desc="Benchmark")

    for step in steps:
        t0 = time.perf_counter()
        if step == "encode":
            tv = enc.encode(data, typ)
            enc_ms = (time.perf_counter() - t0) * 1000
        else:
            dec.decode(tv)
            dec_ms = (time.perf_counter() - t0) * 1000

    print(f"n={ns.n:,} | encode {enc_ms:.2f} ms | decode {dec_ms:.2f} ms")
    return 0


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------

def _add_policy_args(sp):
    sp.add_argument("--missing", choices=["error", "null"], default=None,
                    help="missing object attributes: fail (default) or encode as null")
    sp.add_argument("--extra", choices=["ignore", "error"], default=None,
                    help="unexpected object attributes: ignore (default) or fail")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="tvbridge", description="typed value <-> dynamic tree toolkit")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    # check ----------------------------------------------------------
    sp = sub.add_parser("check", help="does a JSON document fit a type?")
    sp.add_argument("--type", "-t", type=Path, required=True, help="type notation file")
    sp.add_argument("--input", "-i", type=Path, required=True)
    _add_policy_args(sp)
    sp.set_defaults(func=cmd_check)

    # roundtrip ------------------------------------------------------
    sp = sub.add_parser("roundtrip", help="JSON → typed value → JSON")
    sp.add_argument("--type", "-t", type=Path, required=True, help="type notation file")
    sp.add_argument("--input", "-i", type=Path, required=True)
    sp.add_argument("--output", "-o", type=Path, required=True)
    _add_policy_args(sp)
    sp.set_defaults(func=cmd_roundtrip)

    # bench ----------------------------------------------------------
    sp = sub.add_parser("bench", help="quick encode/decode benchmark")
    sp.add_argument("--n", type=int, default=10000, help="synthetic record count")
    sp.add_argument("--progress", action="store_true", help="show progress bar with tqdm")
    sp.set_defaults(func=cmd_bench)

    ns = ap.parse_args(argv)
    if ns.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
    return ns.func(ns)


if __name__ == "__main__":
    sys.exit(main())
