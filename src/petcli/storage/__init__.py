from petcli.storage.base import DecodeError, ReadError, Store, StoreError, StoreIndexError, WriteError
from petcli.storage.json_store import StoreToJSON
from petcli.storage.yaml_store import StoreToYAML
from petcli.util.dirs import load_env

__all__ = [
    "DecodeError",
    "ReadError",
    "Store",
    "StoreError",
    "StoreIndexError",
    "StoreToJSON",
    "StoreToYAML",
    "WriteError",
    "get_store",
]


def get_store(data_path: str | None = None) -> Store:
    data_path = data_path or load_env()["DATA_PATH"]
    if data_path.endswith(".json"):
        return StoreToJSON(data_path)
    if data_path.endswith((".yaml", ".yml")):
        return StoreToYAML(data_path)
    _msg = f"Invalid data path (expected .json, .yaml or .yml): {data_path}"
    raise ValueError(_msg)
