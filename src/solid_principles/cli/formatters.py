"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for example listings
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, default_style=None, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(record=True, width=120, color_system=None)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")


def format_examples_table(examples: List[Dict[str, Any]]) -> str:
    """Format registered examples as a table."""
    if not examples:
        return "No examples found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Principle", style="green")
    table.add_column("Description")

    for example in examples:
        table.add_row(example["name"], example["principle"], example["description"])

    return _render(table)


def format_results_table(results: Dict[str, str]) -> str:
    """Format example run results as a table."""
    if not results:
        return "No examples run."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Example", style="cyan")
    table.add_column("Result")

    for name, result in results.items():
        table.add_row(name, result)

    return _render(table)
