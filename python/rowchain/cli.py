import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import _runtime
from .errors import MatrixLoadError, OperationError
from .io import load, save
from .ops import add, multiply, subtract

logger = logging.getLogger(__name__)

OPERATIONS = {
    "add": ("Addition", add),
    "sub": ("Subtraction", subtract),
    "mul": ("Multiplication", multiply),
}

EXIT_OK = 0
EXIT_OPERATION_ERROR = 1
EXIT_LOAD_ERROR = 2
EXIT_SAVE_ERROR = 3


def default_output_name(left: str, op: str, right: str) -> str:
    """``result_<left stem>_<op>_<right stem>.txt``"""
    return f"result_{Path(left).stem}_{op}_{Path(right).stem}.txt"


def format_preview(matrix, limit: Optional[int] = None) -> str:
    shown = matrix.preview(limit)
    lines = [f"Sparse Matrix ({matrix.nrows}x{matrix.ncols}):", f"Non-zero elements: {matrix.nnz}"]
    lines.extend(f"({r}, {c}) = {v}" for r, c, v in shown)
    if matrix.nnz > len(shown):
        lines.append(f"... and {matrix.nnz - len(shown)} more elements")
    return "\n".join(lines)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rowchain", description="Add, subtract or multiply two sparse matrix files"
    )
    p.add_argument("op", choices=sorted(OPERATIONS), help="Operation to perform")
    p.add_argument("left", help="Path of matrix A")
    p.add_argument("right", help="Path of matrix B")
    p.add_argument("-o", "--output", default=None, help="Result path (default: result_<A>_<op>_<B>.txt)")
    p.add_argument("--max-cells", type=_positive_int, default=None, help="Size guard for multiplication results")
    p.add_argument("--preview", type=_positive_int, default=None, help="Number of result entries to print")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress at DEBUG level")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    if args.max_cells is not None:
        _runtime.set_max_result_cells(args.max_cells)

    name, func = OPERATIONS[args.op]
    try:
        a = load(args.left)
        b = load(args.right)
    except MatrixLoadError as exc:
        logger.error("%s", exc)
        return EXIT_LOAD_ERROR

    try:
        result = func(a, b)
    except OperationError as exc:
        logger.error("%s failed: %s", name, exc)
        return EXIT_OPERATION_ERROR

    output = args.output or default_output_name(args.left, args.op, args.right)
    try:
        save(result, output)
    except OSError as exc:
        logger.error("Error writing to file %s: %s", output, exc)
        return EXIT_SAVE_ERROR
    print(f"Result: {result.nrows}x{result.ncols} ({result.nnz} non-zero elements) -> {output}")
    print(format_preview(result, args.preview))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
