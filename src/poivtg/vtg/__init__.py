"""VTG vocabulary, classifier and generator.

classify_vtg maps a continuous two-hand state onto {arm element, poi
element, phase bucket}; generate_vtg_state goes the other way and checks
itself by classifying its own output.
"""

from .classify import classify_vtg, try_classify_vtg
from .generate import generate_vtg_state
from .geometry import (
    CardinalGeometry,
    CardinalGeometryDescription,
    describe_arm_geometry_at_cardinals,
    describe_element_geometry_at_cardinals,
    describe_poi_geometry_at_cardinals,
)
from .types import (
    VTG_ELEMENTS,
    VTG_PHASE_BUCKETS,
    VTGClassification,
    VTGDescriptor,
    VTGDirection,
    VTGElement,
    VTGRelation,
    VTGTiming,
)

__all__ = [
    "classify_vtg",
    "try_classify_vtg",
    "generate_vtg_state",
    "CardinalGeometry",
    "CardinalGeometryDescription",
    "describe_arm_geometry_at_cardinals",
    "describe_element_geometry_at_cardinals",
    "describe_poi_geometry_at_cardinals",
    "VTG_ELEMENTS",
    "VTG_PHASE_BUCKETS",
    "VTGClassification",
    "VTGDescriptor",
    "VTGDirection",
    "VTGElement",
    "VTGRelation",
    "VTGTiming",
]
