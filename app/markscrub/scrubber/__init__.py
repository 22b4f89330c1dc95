"""Marker scrubbing pipeline.

This module provides the scan, reconcile and destroy stages together
with the marker models and the plain-text list artifacts they share.
"""

from markscrub.scrubber.destroyer import MarkerDestroyer, processing_order
from markscrub.scrubber.models import (
    DestroySummary,
    EntryType,
    MarkedEntry,
    Marker,
    ReconcileResult,
    RenameResult,
    RenameStatus,
    SkipReason,
    find_marker,
    strip_marker,
)
from markscrub.scrubber.reconciler import Reconciler
from markscrub.scrubber.report import read_path_list, write_path_list
from markscrub.scrubber.scanner import MarkerScanner

__all__ = [
    "DestroySummary",
    "EntryType",
    "MarkedEntry",
    "Marker",
    "MarkerDestroyer",
    "MarkerScanner",
    "ReconcileResult",
    "Reconciler",
    "RenameResult",
    "RenameStatus",
    "SkipReason",
    "find_marker",
    "processing_order",
    "read_path_list",
    "strip_marker",
    "write_path_list",
]
