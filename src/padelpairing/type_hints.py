"""Type hints used in Padel Pairing."""

from typing import Any, Dict, Tuple

Team = Tuple[int, int]
Partnership = Tuple[int, int]
FormatState = Dict[str, Any]
