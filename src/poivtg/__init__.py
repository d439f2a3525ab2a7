"""poi-vtg: two-hand poi geometry and VTG pattern classification.

The engine turns oscillator parameters (arm + relative poi, per hand)
into angles and positions over beat time. The VTG layer names the
relationship between the hands with a small discrete vocabulary:
Earth/Air/Water/Fire elements for arms and heads, a quarter-turn phase
bucket, and a signed head-cycles-per-arm-cycle count.

Nothing here does I/O or keeps a clock; callers own time and storage.
"""

from .config import EngineDefaults, create_default_state
from .engine import (
    advance_trail_sampler,
    create_trail_sampler,
    get_angles,
    get_positions,
    get_trail_points,
    sample_loop,
)
from .errors import (
    ClassificationAmbiguityError,
    GenerationInvariantError,
    InputValidationError,
    PoiVTGError,
)
from .state import (
    HandId,
    HandState,
    HandsState,
    PatternState,
    PhaseReference,
    from_reference_phase,
    to_reference_phase,
)
from .vtg import (
    VTGDescriptor,
    VTGElement,
    classify_vtg,
    generate_vtg_state,
)

__version__ = "0.1.0"

__all__ = [
    "EngineDefaults",
    "create_default_state",
    "advance_trail_sampler",
    "create_trail_sampler",
    "get_angles",
    "get_positions",
    "get_trail_points",
    "sample_loop",
    "ClassificationAmbiguityError",
    "GenerationInvariantError",
    "InputValidationError",
    "PoiVTGError",
    "HandId",
    "HandState",
    "HandsState",
    "PatternState",
    "PhaseReference",
    "from_reference_phase",
    "to_reference_phase",
    "VTGDescriptor",
    "VTGElement",
    "classify_vtg",
    "generate_vtg_state",
]
