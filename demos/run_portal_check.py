# File: demos/run_portal_check.py
"""
DEMO: PORTAL FRAME CODE CHECK
=============================

Checks a steel portal frame (two columns, two rafters) under the four
factored load combinations and prints the worst case of each member.

USAGE:
------
    python demos/run_portal_check.py
    python demos/run_portal_check.py --beam1-conn moment --beam2-conn moment
    python demos/run_portal_check.py --section 300 10 200 15 --svg artifacts/frame.svg

Exit code: 0 if the frame is safe, 1 if any member is unsafe, 2 on invalid
input.
"""

import argparse
import logging
import os
from typing import Optional, Sequence

from portal_check import FrameInput, ISection, InvalidFrameError, run_analysis
from portal_check.config import CONFIG
from portal_check.report import combination_table, format_report

MEMBER_SECTION_OPTIONS = ('col1', 'col2', 'beam1', 'beam2')

RANGE_CHECKS = (
    ('height', 'height_mm', CONFIG.height_range),
    ('width', 'width_mm', CONFIG.width_range),
    ('K', 'k_factor', CONFIG.k_factor_range),
)


def _range_help(text: str, default: float, bounds) -> str:
    return f'{text} (default: {default:g}, range: {bounds[0]:g}-{bounds[1]:g})'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Check a steel portal frame under the standard load combinations',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demos/run_portal_check.py
  python demos/run_portal_check.py --K 2.0 --wind 5000 --csv artifacts/combos.csv
  python demos/run_portal_check.py --col1-section 300 10 200 15 --col2-section 300 10 200 15
        """
    )
    parser.add_argument('--height', type=float, default=CONFIG.default_height_mm,
                        help=_range_help('Column clear height in mm',
                                         CONFIG.default_height_mm, CONFIG.height_range))
    parser.add_argument('--width', type=float, default=CONFIG.default_width_mm,
                        help=_range_help('Frame width in mm',
                                         CONFIG.default_width_mm, CONFIG.width_range))
    parser.add_argument('--dead', type=float, default=CONFIG.default_dead_kg_m,
                        help=f'Dead load in kg/m (default: {CONFIG.default_dead_kg_m:g})')
    parser.add_argument('--live', type=float, default=CONFIG.default_live_kg_m,
                        help=f'Live load in kg/m (default: {CONFIG.default_live_kg_m:g})')
    parser.add_argument('--wind', type=float, default=CONFIG.default_wind_kg,
                        help=f'Wind load per column in kg (default: {CONFIG.default_wind_kg:g})')
    parser.add_argument('--fy', type=float, default=CONFIG.default_fy_mpa,
                        help=f'Yield strength in MPa (default: {CONFIG.default_fy_mpa:g})')
    parser.add_argument('--E', type=float, default=CONFIG.default_e_gpa,
                        help=f'Elastic modulus in GPa (default: {CONFIG.default_e_gpa:g})')
    parser.add_argument('--K', type=float, default=CONFIG.default_k_factor,
                        help=_range_help('Column effective length factor',
                                         CONFIG.default_k_factor, CONFIG.k_factor_range))
    parser.add_argument('--section', type=float, nargs=4, metavar=('H', 'TW', 'BF', 'TF'),
                        default=[CONFIG.default_section_h, CONFIG.default_section_tw,
                                 CONFIG.default_section_bf, CONFIG.default_section_tf],
                        help='I-section for every member in mm (default: 200 8 150 12)')
    for key in MEMBER_SECTION_OPTIONS:
        parser.add_argument(f'--{key}-section', type=float, nargs=4, metavar=('H', 'TW', 'BF', 'TF'),
                            help=f'I-section for {key} in mm (overrides --section)')
    parser.add_argument('--beam1-conn', choices=['hinge', 'moment'], default=CONFIG.default_connection)
    parser.add_argument('--beam2-conn', choices=['hinge', 'moment'], default=CONFIG.default_connection)
    parser.add_argument('--svg', help='Write the frame status diagram to this path')
    parser.add_argument('--csv', help='Write the per-combination table to this path')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log each combination')
    return parser


def frame_from_args(args: argparse.Namespace) -> FrameInput:
    sections = {}
    for key in MEMBER_SECTION_OPTIONS:
        dims = getattr(args, f'{key}_section') or args.section
        sections[key] = ISection(*dims)
    return FrameInput(
        height_mm=args.height,
        width_mm=args.width,
        dead_load_kg_m=args.dead,
        live_load_kg_m=args.live,
        wind_load_kg=args.wind,
        fy_mpa=args.fy,
        e_gpa=args.E,
        k_factor=args.K,
        beam1_conn=args.beam1_conn,
        beam2_conn=args.beam2_conn,
        **sections,
    )


def check_ranges(args: argparse.Namespace) -> None:
    """Reject values outside the configured boundary ranges."""
    for option, field_name, (low, high) in RANGE_CHECKS:
        value = getattr(args, option)
        if not low <= value <= high:
            raise InvalidFrameError(f"{field_name} must be within {low:g}-{high:g}, got {value:g}")


def _ensure_parent(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    print("=" * 70)
    print("PORTAL FRAME CODE CHECK")
    print("=" * 70)
    print()

    frame = frame_from_args(args)
    try:
        check_ranges(args)
        verdict = run_analysis(frame)
    except InvalidFrameError as e:
        print(f"Invalid input: {e}")
        return 2

    print(f"Rafter length: {verdict.rafter_length_m:.3f} m")
    print()
    print(format_report(verdict))
    print()

    if args.csv:
        _ensure_parent(args.csv)
        combination_table(verdict).to_csv(args.csv, index=False)
        print(f"  [CSV] {args.csv}")
    if args.svg:
        import matplotlib.pyplot as plt
        from portal_check.viz import plot_frame_status
        fig = plot_frame_status(frame, verdict, outpath=args.svg)
        plt.close(fig)
        print(f"  [SVG] {args.svg}")

    return 0 if verdict.safe else 1


if __name__ == "__main__":
    raise SystemExit(main())
