"""
constants.py — shared constants used across the API and the seed routine.

Site classification enums, workflow statuses and cost categories are
defined here as typed literals so the ORM, the record models and the API
filters stay in sync.
"""

from __future__ import annotations

from typing import Final, Literal

# ---------------------------------------------------------------------------
# Site classification
# ---------------------------------------------------------------------------
SlopeClass = Literal["FLAT", "GENTLE", "MODERATE", "STEEP", "VERY_STEEP"]

SoilTexture = Literal[
    "SAND",
    "SANDY",
    "LOAMY_SAND",
    "SANDY_LOAM",
    "LOAM",
    "SILT_LOAM",
    "CLAY_LOAM",
    "CLAY",
]

LandUse = Literal["ARABLE", "PASTURE", "FOREST", "SHRUBLAND", "DEGRADED", "SETTLEMENT"]

Drainage = Literal["POOR", "IMPERFECT", "MODERATE", "WELL", "EXCESSIVE"]

RainfallBand = Literal["ARID", "SEMI_ARID", "SUB_HUMID", "HUMID"]

GullyState = Literal["NONE", "MINOR", "MODERATE", "SEVERE"]

# ---------------------------------------------------------------------------
# Workflow statuses
# ---------------------------------------------------------------------------
SiteTechniqueStatus = Literal["PLANNED", "ACTIVE", "COMPLETED", "SUSPENDED"]

DesignStatus = Literal["DRAFT", "IN_REVIEW", "APPROVED", "ARCHIVED"]

CostCategory = Literal["labor", "materials", "equipment", "transport", "other"]

DEFAULT_CURRENCY: Final[str] = "USD"
