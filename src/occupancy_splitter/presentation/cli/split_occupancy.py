#!/usr/bin/env python3
# src/occupancy_splitter/presentation/cli/split_occupancy.py

"""
Command-line interface splitting a structure into clash-free models.

Chains with fractional occupancy are alternate placements of the same
region. For every maximal combination of them that can coexist without
clashes, a copy of the input is written that keeps those chains together
with every fully occupied chain.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ...core.domain.models.resolver_config import (
    ALL_MODE,
    FRACTIONAL_MODE,
    PHOSPHORUS_VDW_RADIUS,
    ResolverConfig,
)
from ...core.exceptions import ClashResolutionError
from ...core.services.clash_resolution_service import ClashResolutionService
from ...infrastructure.repositories.structure_repository import StructureRepository


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure console and optional file logging."""
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logger = logging.getLogger("occupancy_splitter")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="occupancy-splitter",
        description="Split alternate-conformation chains into clash-free mmCIF files",
    )
    parser.add_argument(
        "-i", "--input", required=True, type=Path, help="Path to input mmCIF file"
    )
    parser.add_argument(
        "--mode",
        choices=[FRACTIONAL_MODE, ALL_MODE],
        default=FRACTIONAL_MODE,
        help="Check clashes among fractional chains only, or among all chains",
    )
    parser.add_argument(
        "--atom",
        default="P",
        help="Representative atom name used for each residue (default: P)",
    )
    parser.add_argument(
        "--vdw-radius",
        type=float,
        default=PHOSPHORUS_VDW_RADIUS,
        help="Distance in Angstroms below which atoms clash",
    )
    parser.add_argument(
        "--max-component-size",
        type=int,
        default=20,
        help="Largest group of clashing chains searched exhaustively",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of processes for searching connected components",
    )
    parser.add_argument(
        "-o", "--output-dir", type=Path, help="Directory for output files"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List solutions without writing files",
    )
    parser.add_argument("--log-file", type=Path, help="Also write log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for occupancy splitting CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose, args.log_file)

    try:
        config = ResolverConfig(
            vdw_radius=args.vdw_radius,
            representative_atom=args.atom,
            mode=args.mode,
            max_component_size=args.max_component_size,
            n_workers=args.workers,
        )
    except ValueError as e:
        parser.error(str(e))

    service = ClashResolutionService(config=config)
    try:
        repository = StructureRepository(args.input)
        occupancy = repository.read_occupancy()
        vertices = service.graph_vertices(occupancy)
        chain_atoms = repository.read_atoms(vertices, config.representative_atom)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1

    try:
        result = service.resolve(occupancy, chain_atoms)
    except ClashResolutionError as e:
        logger.error(str(e))
        return 1

    if result.is_clash_free:
        print("No clashes detected!")
        return 0

    for solution in tqdm(result.solutions, desc="Writing solutions", disable=args.dry_run):
        out_path = repository.output_path_for(solution, args.output_dir)
        if args.dry_run:
            print(f"Solution: {solution.name} -> {out_path}")
            continue
        repository.write_selection(solution.retained, out_path)
        print(f"Output file: {out_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
