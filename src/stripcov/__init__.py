"""stripcov: strip selected functions' coverage data from LCOV tracefiles."""

from .models import ShieldConfig
from .tracefile import RecordTransformer, strip_tracefile

__all__ = ["__version__", "RecordTransformer", "ShieldConfig", "strip_tracefile"]

__version__ = "1.0.0"
