"""Command-line inspector for dotreflect."""

from .summary import FieldSummary as FieldSummary
from .summary import MethodSummary as MethodSummary
