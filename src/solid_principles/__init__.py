"""SOLID Principles - Root Package.

This package illustrates the five SOLID object-oriented design principles
through small simulated domains: payment processing, game entities, birds,
shapes, quiz questions and calorie tracking.

Key Components:
    - domain: Capability contracts and the variants implementing them
    - application: Variant dispatcher, services and example drivers
    - infrastructure: Logging, error handling, payment processors, registries
    - config: Typed configuration loaded from files and environment
    - cli: Command-line interface for listing and running examples

Architecture:
    Every example holds its collaborators through abstract contracts only.
    Behavioural differences are resolved by the variants themselves, never by
    the caller inspecting concrete types.
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "SOLID Principles Contributors"
__package_name__ = PACKAGE_NAME

"""
Usage:
    The examples are typically run through the command-line interface:

    >>> solid-principles list
    >>> solid-principles run birds shapes
"""
