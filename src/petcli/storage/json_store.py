import json
from typing import Any

from petcli.storage.base import Store


class StoreToJSON(Store):
    """JSON配列 (1ファイル) に Pet の列を保存する。"""

    def encode(self, raw: list[dict[str, Any]]) -> str:
        return json.dumps(raw, ensure_ascii=False, indent=2)

    def decode(self, text: str) -> Any:
        # json.JSONDecodeError is a ValueError
        return json.loads(text)
