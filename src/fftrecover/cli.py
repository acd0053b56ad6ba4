"""
Command-line demonstration of erasure recovery.

Usage:
    fftrecover                                  # both domains, data [5, 7], lose {1, 2}
    fftrecover --domain prime --modulus 97 --length 8 --data 1 2 3 4 --erase 0 3 5
    fftrecover --domain gaussian --scale 3 -v
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Any, Iterable, List, Optional, Sequence

from .errors import RecoveryError
from .field import DEFAULT_MODULUS, Field, PrimeField
from .gaussian import GaussianIntegers
from .params import RecoveryParams
from .poly import Polynomial
from .recovery import RecoveryPipeline


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a compact StreamHandler to the package logger (once)."""
    logger = logging.getLogger("fftrecover")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)
    return logger


def format_vector(label: str, values: Iterable[Any]) -> str:
    """Render one stage as '<label>: [a, b, c, d]' with the label right-aligned."""
    body = ", ".join("?" if v is None else str(v) for v in values)
    return f"{label:>18}: [{body}]"


def run_demo(
    field: Field,
    data: Sequence[int],
    erased: Sequence[int],
    params: RecoveryParams,
    out=None,
) -> bool:
    """
    Encode data, drop the erased samples, recover, print every stage.

    Returns True when the recovered values equal the input exactly.
    """
    out = out or sys.stdout
    pipeline = RecoveryPipeline(field, params)
    values = [field.coerce(v) for v in data]

    print(f"=== {field.describe()}, n={params.transform_length} ===", file=out)
    padded = Polynomial(field, values).padded(params.transform_length)
    print(format_vector("Initial values", padded), file=out)

    encoded = pipeline.encode(values)
    print(format_vector("Data encoded", encoded), file=out)

    result = pipeline.recover(pipeline.erase(encoded, erased))
    for label, stage in result.trace:
        print(format_vector(label, stage), file=out)

    ok = result.data == values
    print(f"{'Recovered data':>18}: {'OK' if ok else 'MISMATCH'}", file=out)
    return ok


def _fields(args) -> List[Field]:
    fields: List[Field] = []
    if args.domain in ('prime', 'both'):
        fields.append(PrimeField(args.modulus))
    if args.domain in ('gaussian', 'both'):
        fields.append(GaussianIntegers())
    return fields


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration from command line."""
    parser = argparse.ArgumentParser(
        prog='fftrecover',
        description='Reed-Solomon erasure recovery with the zero-polynomial trick',
    )
    parser.add_argument('--domain', choices=['prime', 'gaussian', 'both'], default='both',
                        help='Arithmetic domain (default: both)')
    parser.add_argument('--modulus', type=int, default=DEFAULT_MODULUS,
                        help=f'Prime modulus (default: {DEFAULT_MODULUS})')
    parser.add_argument('--length', type=int, default=4,
                        help='Transform length, a power of 2 (default: 4)')
    parser.add_argument('--data', type=int, nargs='+', default=[5, 7],
                        help='Data values (default: 5 7)')
    parser.add_argument('--erase', type=int, nargs='*', default=[1, 2],
                        help='Indices of lost samples (default: 1 2)')
    parser.add_argument('--scale', type=int, default=None,
                        help='Scale factor (default: automatic)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every stage')
    parser.add_argument('--quiet', '-q', action='store_true', help='Minimal output')

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    log = logging.getLogger("fftrecover.cli")

    try:
        params = RecoveryParams(
            transform_length=args.length,
            data_length=len(args.data),
            scale_factor=args.scale,
        )
        fields = _fields(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    all_ok = True
    for f in fields:
        try:
            if args.quiet:
                pipeline = RecoveryPipeline(f, params)
                received = pipeline.erase(pipeline.encode(args.data), args.erase)
                ok = pipeline.recover_data(received) == [f.coerce(v) for v in args.data]
                print(f"{f.describe()}: {'OK' if ok else 'MISMATCH'}")
            else:
                ok = run_demo(f, args.data, args.erase, params)
                print()
        except (RecoveryError, ValueError, IndexError) as e:
            log.error("recovery over %s failed: %s", f.describe(), e)
            print(f"error: {f.describe()}: {e}", file=sys.stderr)
            return 2
        all_ok = all_ok and ok

    return 0 if all_ok else 1


if __name__ == '__main__':
    sys.exit(main())
