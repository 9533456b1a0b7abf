"""Reporting helpers."""

from .summary import build_batch_report

__all__ = ["build_batch_report"]
