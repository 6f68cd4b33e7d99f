# portal_check - Steel portal frame code check
"""
PORTAL_CHECK: Steel Portal Frame Code Check
===========================================

Checks a single-bay steel portal frame (two columns, two rafters) under a
fixed table of factored load combinations.

ARCHITECTURE:
-------------
    units.py        Unit conversions (user units -> SI)
    config.py       Defaults and limits
    section.py      I-section elastic properties
    combos.py       Load combination table
    beams.py        Rafter end actions and bending check
    checks/         Column P-M interaction and Euler buckling
    model.py        FrameInput (the input parameter set)
    results.py      Result containers (ComboResult, worst cases, verdict)
    envelope.py     Worst-case selection across combinations
    analysis.py     Per-combination analysis and run_analysis()
    report.py       Text report and pandas tables
    viz.py          Frame status diagram (matplotlib / SVG)
"""

from .section import ISection, SectionProperties, InvalidSectionError, i_section_properties
from .combos import LoadCombination, LOAD_COMBINATIONS, get_combination
from .beams import ConnectionType, MemberReactions, beam_reactions
from .model import FrameInput, InvalidFrameError, MEMBER_LABELS
from .results import ComboResult, BeamWorstCase, ColumnWorstCase, FrameVerdict
from .analysis import analyze_combination, run_analysis

__version__ = "0.1.0"
