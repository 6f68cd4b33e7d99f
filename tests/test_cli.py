# File: tests/test_cli.py
"""
Test the command-line demo end to end.
"""

import importlib.util
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

DEMO = Path(__file__).resolve().parent.parent / "demos" / "run_portal_check.py"


def load_demo():
    spec = importlib.util.spec_from_file_location("run_portal_check", DEMO)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_default_frame_is_unsafe(capsys):
    demo = load_demo()
    assert demo.main([]) == 1
    out = capsys.readouterr().out
    assert "PORTAL FRAME CODE CHECK" in out
    assert "29.155 m" in out


def test_safe_frame_exit_zero(tmp_path, capsys):
    demo = load_demo()
    csv_path = tmp_path / "combos.csv"
    svg_path = tmp_path / "frame.svg"
    code = demo.main([
        "--height", "3000", "--width", "8000", "--wind", "500",
        "--csv", str(csv_path), "--svg", str(svg_path),
    ])
    assert code == 0
    assert csv_path.exists() and svg_path.exists()
    assert "frame is SAFE" in capsys.readouterr().out


def test_invalid_input_exit_two(capsys):
    demo = load_demo()
    assert demo.main(["--section", "200", "8", "150", "0"]) == 2
    assert "Invalid input" in capsys.readouterr().out


def test_csv_into_missing_directory(tmp_path):
    """Output directories are created for the CSV export as for the diagram."""
    demo = load_demo()
    csv_path = tmp_path / "artifacts" / "combos.csv"
    code = demo.main(["--K", "2.0", "--wind", "5000", "--csv", str(csv_path)])
    assert code in (0, 1)
    assert csv_path.exists()
    assert csv_path.read_text().startswith("combo,")


def test_svg_export_closes_figure(tmp_path):
    import matplotlib.pyplot as plt

    demo = load_demo()
    plt.close('all')
    demo.main(["--svg", str(tmp_path / "frame.svg")])
    assert plt.get_fignums() == []


def test_per_member_sections_override_shared_section():
    demo = load_demo()
    args = demo.build_parser().parse_args([
        "--section", "300", "10", "200", "15",
        "--col1-section", "250", "9", "180", "14",
        "--beam2-section", "60", "3", "20", "2",
    ])
    frame = demo.frame_from_args(args)

    assert frame.col1.h == 250 and frame.col1.tf == 14
    assert frame.beam2.h == 60 and frame.beam2.bf == 20
    assert frame.col2.h == 300 and frame.beam1.h == 300


def test_undersized_single_rafter_is_unsafe(capsys):
    demo = load_demo()
    code = demo.main([
        "--height", "3000", "--width", "8000", "--wind", "500", "--dead", "2000",
        "--beam2-section", "60", "3", "20", "2",
    ])
    assert code == 1
    assert "frame has UNSAFE members" in capsys.readouterr().out


def test_out_of_range_input_exit_two(capsys):
    demo = load_demo()
    assert demo.main(["--K", "3.0"]) == 2
    assert "k_factor" in capsys.readouterr().out
    assert demo.main(["--height", "500"]) == 2


def test_help_lists_ranges():
    demo = load_demo()
    text = demo.build_parser().format_help()
    assert "range: 0.5-2.5" in text
    assert "--beam2-section" in text
