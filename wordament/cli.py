"""
Command-line solver.

Usage:
    wordament-solve --letters abcd --width 2 --height 2 --dictionary words.txt
    wordament-solve --letters "tape/insa/edrl/kghm" --values 2,2,4,1,... -v
    wordament-solve --letters abcd -w 2 -H 2 --set DICTIONARY_URL=https://example.com/words.txt

Letters are given in row-major order; whitespace, commas and '/' are ignored.
Without --values each cell scores its standard Wordament tile value.
"""
import argparse
import logging
import re

from wordament.dictionary import load_dictionary
from wordament.grid import LETTER_VALUES, Grid
from wordament.metrics import StageTimer
from wordament.settings import Settings, settings, update_settings
from wordament.solver import DuplicatePolicy, Solution, solve
from wordament.wordlist import DictionarySourceError

logger = logging.getLogger("wordament")

_SEPARATORS = re.compile(r"[\s,/]+")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find every dictionary word in a Wordament grid")
    parser.add_argument("--letters", required=True,
                        help="Grid letters in row-major order (e.g. 'abcd' or 'ab/cd')")
    parser.add_argument("-w", "--width", type=int, default=None,
                        help="Grid width (default: GRID_WIDTH setting)")
    parser.add_argument("-H", "--height", type=int, default=None,
                        help="Grid height (default: GRID_HEIGHT setting)")
    parser.add_argument("--values", type=str, default=None,
                        help="Comma-separated point values, one per cell, row-major")
    parser.add_argument("-d", "--dictionary", type=str, default=None,
                        help="Word list path or http(s) URL (default: DICTIONARY_URL or DICTIONARY_PATH)")
    parser.add_argument("--min-length", type=int, default=None,
                        help="Ignore dictionary words shorter than this (default: MIN_WORD_LENGTH)")
    parser.add_argument("--first-match", action="store_true",
                        help="Report each word once instead of once per path")
    parser.add_argument("--workers", type=int, default=None,
                        help="Threads for per-cell search (default: MAX_WORKERS, 0 = serial)")
    parser.add_argument("--set", action="append", default=[], metavar="KEY=VALUE",
                        help="Override a setting for this run (repeatable)")
    parser.add_argument("--dump-dictionary", action="store_true",
                        help="Print the dictionary trie before solving")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print every found word with its score and path")
    return parser


def parse_overrides(pairs: list[str]) -> dict[str, str]:
    overrides = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        overrides[key.strip()] = value.strip()
    return overrides


def build_grid(letters: str, width: int, height: int, values: str | None = None) -> Grid:
    cells = list(_SEPARATORS.sub("", letters))
    if len(cells) != width * height:
        raise ValueError(f"Expected {width * height} letters for a {height}x{width} grid, got {len(cells)}")

    if values is None:
        points = [LETTER_VALUES.get(ch.lower(), 0) for ch in cells]
    else:
        points = [int(v) for v in values.split(",") if v.strip()]
        if len(points) != len(cells):
            raise ValueError(f"Expected {len(cells)} values, got {len(points)}")

    grid = Grid(width, height)
    for i, (letter, value) in enumerate(zip(cells, points)):
        row, col = divmod(i, width)
        grid.set(letter, value, row, col)
    return grid


def format_solution(solution: Solution, verbose: bool = False) -> str:
    lines = [str(solution)]
    if verbose and len(solution):
        lines.append("")
        lines.append(f" {'#':>3}  {'Score':>5}  {'Word':<16} Path")
        lines.append("-" * 60)
        for i, found in enumerate(solution, start=1):
            path = " ".join(f"({r},{c})" for r, c in found.path)
            lines.append(f" {i:>3}  {found.score:>5}  {found.word:<16} {path}")
    return "\n".join(lines)


def main(argv: list[str] | None = None, cfg: Settings | None = None) -> int:
    cfg = cfg if cfg is not None else settings
    args = build_parser().parse_args(argv)

    try:
        errors = update_settings(cfg, **parse_overrides(args.set))
    except ValueError as e:
        errors = {"--set": str(e)}

    logging.basicConfig(
        level=logging.DEBUG if cfg.DEBUG else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if errors:
        for name, err in errors.items():
            logger.error("Invalid setting %s: %s", name, err)
        return 1

    width = args.width if args.width is not None else cfg.GRID_WIDTH
    height = args.height if args.height is not None else cfg.GRID_HEIGHT
    source = args.dictionary or cfg.dictionary_source
    min_length = args.min_length if args.min_length is not None else cfg.MIN_WORD_LENGTH
    workers = args.workers if args.workers is not None else cfg.MAX_WORKERS
    policy = (
        DuplicatePolicy.FIRST_MATCH
        if args.first_match or not cfg.REPORT_ALL_PATHS
        else DuplicatePolicy.ALL_PATHS
    )

    timer = StageTimer()
    try:
        with timer.stage("build_grid"):
            grid = build_grid(args.letters, width, height, args.values)
    except (ValueError, IndexError) as e:
        logger.error("Invalid grid: %s", e)
        return 1

    try:
        with timer.stage("load_dictionary"):
            dictionary = load_dictionary(source, min_length, timeout=cfg.HTTP_TIMEOUT)
    except DictionarySourceError as e:
        logger.error("Dictionary unavailable: %s", e)
        return 1

    print(f"Grid:\n{grid}\n")
    if args.dump_dictionary:
        print(f"Dictionary:\n{dictionary.render()}\n")

    with timer.stage("solve"):
        solution = solve(grid, dictionary, policy=policy, max_workers=workers)

    print(format_solution(solution, args.verbose))
    logger.info("Timings: %s", timer.format_summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
