from typing import Any

import yaml  # type: ignore[import-untyped]

from petcli.storage.base import Store


class StoreToYAML(Store):
    """YAMLのシーケンスとして Pet の列を保存する。"""

    def encode(self, raw: list[dict[str, Any]]) -> str:
        return yaml.safe_dump(raw, allow_unicode=True, sort_keys=False)

    def decode(self, text: str) -> Any:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            _msg = f"Failed to load YAML file: {e}"
            raise ValueError(_msg) from e
        # an empty document is an empty sequence
        return [] if raw is None else raw
