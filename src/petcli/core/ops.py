import random

from petcli.core.models import CATEGORIES, Pet
from petcli.util.ids import gen_pet_id, gen_pet_name
from petcli.util.time import now_utc

MIN_PET_AGE = 1
MAX_PET_AGE = 14


# ---- ランダム生成 ----------------------------------------------------------


def random_pet(rng: random.Random | None = None) -> Pet:
    """ランダムな Pet を生成する。

    id は一意性チェックをしない (位置ベースの操作なので重複しても壊れない)。
    """
    rng = rng or random.Random()
    return Pet(
        id=gen_pet_id(rng),
        name=gen_pet_name(rng),
        category=rng.choice(CATEGORIES),
        age=rng.randint(MIN_PET_AGE, MAX_PET_AGE),
        created_at=now_utc(),
    )


# ---- 選択カーソル ----------------------------------------------------------


def clamp_index(selected: int, count: int) -> int:
    if count <= 0:
        return 0
    return max(0, min(selected, count - 1))


def next_index(selected: int | None, count: int) -> int | None:
    """次の行へ。末尾なら先頭へ折り返す。空なら何もしない。"""
    if selected is None or count <= 0:
        return selected
    selected = clamp_index(selected, count)
    if selected >= count - 1:
        return 0
    return selected + 1


def prev_index(selected: int | None, count: int) -> int | None:
    """前の行へ。先頭なら末尾へ折り返す。空なら何もしない。"""
    if selected is None or count <= 0:
        return selected
    selected = clamp_index(selected, count)
    if selected > 0:
        return selected - 1
    return count - 1


def index_after_removal(removed: int) -> int:
    return max(removed - 1, 0)
