# product_scraper/utils/output.py

import json
from pathlib import Path
from typing import List, Optional

from product_scraper.interfaces.models import ExtractedRecord
from product_scraper.utils.logging_config import Logger, _log


def save_records(
    records: List[ExtractedRecord],
    path: str,
    logger: Optional[Logger] = None,
    indent: int = 2,
) -> bool:
    """
    Write the records as a pretty-printed JSON array (UTF-8).

    Best effort: a failed write is logged and reported as False, the
    caller keeps going.
    """
    try:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(
            json.dumps(records, indent=indent, ensure_ascii=False),
            encoding="utf-8",
        )
    except Exception as e:
        _log(logger, f"❌ Could not write {path}: {e}")
        return False

    _log(logger, f"💾 {len(records)} records written to {path}")
    return True
