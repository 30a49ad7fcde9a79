from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from result import Err, Ok, Result

from petcli.core.models import Pet
from petcli.util.dirs import load_env
from petcli.util.logger import setup_logger

logger = setup_logger("petcli", is_stream=False, is_file=True)


class StoreError(Exception):
    """ストレージ操作の失敗を表す基底例外。Result の Err 側に入れて返す。"""


class ReadError(StoreError):
    """データファイルが存在しない、または読めない。"""


class DecodeError(StoreError):
    """データファイルの内容が Pet の列として解釈できない。"""


class WriteError(StoreError):
    """データファイルへの書き込みに失敗した。"""


class StoreIndexError(StoreError, IndexError):
    """範囲外の位置を指定した。"""


class Store(ABC):
    """ストレージ抽象基底クラス。

    JSON/YAML などのファイル形式ごとの実装の共通インターフェースを定義します。
    全ての操作はファイル全体を読み込み、変更し、ファイル全体を書き戻します
    (メモリ上のキャッシュは持ちません)。

    Public API:
        - get_all_pets(): 全ペットを読み込む
        - add_pet(): ペットを末尾に追加して保存する
        - remove_pet_at(): 指定位置のペットを削除して保存する
        - ensure_data_file(): データファイルが無ければ空の列で作成する

    注意: 削除は id ではなくリスト上の位置で行います。
    """

    def __init__(self, data_path: str | None = None) -> None:
        self.data_path = data_path or load_env()["DATA_PATH"]

    @abstractmethod
    def encode(self, raw: list[dict[str, Any]]) -> str:
        """辞書のリストをファイル内容の文字列に変換する。"""
        raise NotImplementedError

    @abstractmethod
    def decode(self, text: str) -> Any:
        """ファイル内容の文字列を Python オブジェクトに変換する。

        形式が不正な場合は ValueError (またはそのサブクラス) を送出する。
        """
        raise NotImplementedError

    # ---- 基本IO ----

    def _read_text(self) -> str:
        return Path(self.data_path).read_text(encoding="utf-8")

    def _write_text(self, text: str) -> None:
        Path(self.data_path).write_text(text, encoding="utf-8")

    def load(self) -> Result[list[Pet], StoreError]:
        """ファイル全体を読み込み、Pet のリストを返す。

        Returns:
            Ok(list[Pet]): 成功時
            Err(ReadError): ファイルが存在しない・読めない
            Err(DecodeError): 内容が不正
        """
        try:
            text = self._read_text()
        except (OSError, UnicodeDecodeError) as e:
            _msg = f"error reading the DB file: {e}"
            logger.error(_msg)
            return Err(ReadError(_msg))

        try:
            raw = self.decode(text)
        except ValueError as e:
            _msg = f"error parsing the DB file: {e}"
            logger.error(_msg)
            return Err(DecodeError(_msg))

        if not isinstance(raw, list):
            _msg = f"error parsing the DB file: expected a sequence, got {type(raw).__name__}"
            logger.error(_msg)
            return Err(DecodeError(_msg))

        pets: list[Pet] = []
        for i, d in enumerate(raw):
            match Pet.from_dict(d):
                case Ok(pet):
                    pets.append(pet)
                case Err(e):
                    _msg = f"error parsing the DB file: entry {i}: {e}"
                    logger.error(_msg)
                    return Err(DecodeError(_msg))
                case _:
                    return Err(DecodeError("Unexpected error"))
        return Ok(pets)

    def save(self, pets: list[Pet]) -> Result[None, StoreError]:
        """Pet のリストでファイル全体を上書きする。"""
        try:
            self._write_text(self.encode([p.to_dict() for p in pets]))
        except (OSError, ValueError) as e:
            _msg = f"error writing the DB file: {e}"
            logger.error(_msg)
            return Err(WriteError(_msg))
        return Ok(None)

    def ensure_data_file(self) -> Result[None, StoreError]:
        """データファイルが無ければ親ディレクトリごと空の列で作成する。"""
        _path = Path(self.data_path)
        if _path.exists():
            return Ok(None)
        try:
            _path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            _msg = f"error creating the DB directory: {e}"
            logger.error(_msg)
            return Err(WriteError(_msg))
        logger.info(f"Creating empty DB file: {_path}")
        return self.save([])

    # ---- ペット操作 ----

    def get_all_pets(self) -> Result[list[Pet], StoreError]:
        """全ペットを取得する。

        Returns:
            Ok(list[Pet]): 成功時 (保存順)
            Err(StoreError): 失敗時
        """
        return self.load()

    def add_pet(self, pet: Pet) -> Result[list[Pet], StoreError]:
        """ペットを末尾に追加して保存する。

        Args:
            pet: 追加するペット

        Returns:
            Ok(list[Pet]): 成功時 (追加後の全ペット)
            Err(StoreError): 失敗時
        """
        match self.load():
            case Ok(pets):
                pets.append(pet)
                return self.save(pets).and_then(lambda _: Ok(pets))
            case Err(e):
                return Err(e)
            case _:
                return Err(StoreError("Unexpected error"))

    def remove_pet_at(self, index: int) -> Result[None, StoreError]:
        """指定位置のペットを削除して保存する。

        Args:
            index: 削除する位置 (0始まり)。id ではない。

        Returns:
            Ok(None): 成功時
            Err(StoreIndexError): 範囲外 (ファイルは変更しない)
            Err(StoreError): その他の失敗
        """
        match self.load():
            case Ok(pets):
                if index < 0 or index >= len(pets):
                    _msg = f"Pet index out of range: {index} (len={len(pets)})"
                    logger.error(_msg)
                    return Err(StoreIndexError(_msg))
                del pets[index]
                return self.save(pets)
            case Err(e):
                return Err(e)
            case _:
                return Err(StoreError("Unexpected error"))
