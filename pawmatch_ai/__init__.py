"""
PawMatch AI - Compatibility-First Rescue Animal Matching

This package contains the intake wizard that gathers an adopter's lifestyle,
environment and candidate animals, submits them to an external matching agent,
and ranks the compatibility results for display.
"""

__version__ = "1.0.0"
__author__ = "Lee Whieldon"

from .agent import WizardController

__all__ = ["WizardController"]
