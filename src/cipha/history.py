import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import HISTORY_PATH


def log_event(action: str, payload: Dict[str, Any], path: Optional[Union[str, Path]] = None) -> None:
    """
    Append a simple JSON line to history for traceability.
    """
    record = {"action": action, **payload}
    target = Path(path) if path else HISTORY_PATH
    try:
        with target.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        # History failures should not break core functionality.
        pass
