"""
dance/export.py - Report and Export Functions

Plain-text report and JSON export of a DanceResult.
Pure functions.
"""

import json

from .types_result import DanceResult


def generate_report(result: DanceResult) -> str:
    """
    Generate the plain-text summary.

    A detected cycle is reported as "<start> [<length>]" on its own line,
    followed by "Result = <line>".

    Args:
        result: DanceResult to summarize

    Returns:
        str: Report text
    """
    lines = []
    if result.cycle_detected:
        lines.append(f"{result.cycle_start} [{result.cycle_length}]")
    lines.append(f"Result = {result.final_state}")
    return "\n".join(lines)


def export_json(result: DanceResult) -> str:
    """
    Format DanceResult as JSON.

    Args:
        result: DanceResult to export

    Returns:
        str: JSON formatted output
    """
    export_data = {
        "final_state": str(result.final_state),
        "rounds": result.rounds,
        "rounds_simulated": result.rounds_simulated,
        "cycle": {
            "start": result.cycle_start,
            "length": result.cycle_length,
        } if result.cycle_detected else None,
        "receipts": [r["receipt_type"] for r in result.receipts],
    }

    return json.dumps(export_data, indent=2)
