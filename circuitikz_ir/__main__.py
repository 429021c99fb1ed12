import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from circuitikz_ir import (
    NoCircuitBlockError,
    circuit_to_json,
    document_commands,
    error_to_json,
    extract_elements,
    format_tokens,
    get_extractor_config,
    tokenize,
)
from circuitikz_ir.scanner import UnterminatedDelimiter

logger = logging.getLogger(__name__)

INPUT_GLOB = "input-*.tex"


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def output_path_for(path: Path, output_dir: Optional[Path] = None) -> Path:
    """``input-001.tex`` -> ``output-001.json``; other names just get a ``.json`` suffix."""
    name = path.name
    if name.startswith("input-") and name.endswith(".tex"):
        name = "output-" + name[len("input-"):-len(".tex")] + ".json"
    else:
        name = path.with_suffix(".json").name
    return (output_dir or path.parent) / name


def _dump_tokens(commands: Sequence[str]) -> None:
    for idx, command in enumerate(commands):
        print(f"Command {idx}: {command}")
        try:
            print(format_tokens(tokenize(command)), end="")
        except UnterminatedDelimiter as exc:
            print(f"  (not tokenized: {exc})")


def convert_file(path: Path, output_path: Path, *, indent: int = 4, dump_tokens: bool = False) -> bool:
    """Convert one document; returns False when it had no drawing block."""
    text = path.read_text(encoding="utf-8")
    if output_path.exists():
        output_path.unlink()

    try:
        commands = document_commands(text)
    except NoCircuitBlockError as exc:
        logger.error("%s: %s", path, exc)
        output_path.write_text(
            error_to_json("No valid \\begin{circuitikz} block found in the file.", indent=indent),
            encoding="utf-8",
        )
        print(f"{path} -> {output_path}: no drawing block")
        return False

    if dump_tokens:
        _dump_tokens(commands)

    result = extract_elements(commands, get_extractor_config())
    output_path.write_text(circuit_to_json(result.circuit, indent=indent), encoding="utf-8")

    print(f"{path} -> {output_path}: {len(result.circuit)} element(s)")
    counts = result.diagnostics.counts()
    for reason in sorted(counts):
        print(f"  dropped {reason}: {counts[reason]}")
    return True


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Extract circuit elements from circuitikz drawings")
    parser.add_argument(
        "paths",
        nargs="*",
        help=f"Input documents (default: {INPUT_GLOB} in the working directory)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory for the JSON output (default: next to each input)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        help="JSON indentation (default: 4)",
    )
    parser.add_argument(
        "--dump-tokens",
        action="store_true",
        help="Print the tokens of every draw command",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    paths: List[Path] = [Path(p) for p in args.paths] or sorted(Path.cwd().glob(INPUT_GLOB))
    if not paths:
        logger.error("No input files matching %s found", INPUT_GLOB)
        raise SystemExit(1)

    output_dir = Path(args.output_dir) if args.output_dir else None
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Processing %d file(s)", len(paths))
    for path in paths:
        if not path.is_file():
            logger.warning("Input %s not found, skipping", path)
            continue
        try:
            convert_file(
                path,
                output_path_for(path, output_dir),
                indent=args.indent,
                dump_tokens=args.dump_tokens,
            )
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not process %s: %s", path, exc)


if __name__ == "__main__":
    main(sys.argv[1:])
