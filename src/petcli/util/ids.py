import random
import string

MAX_PET_ID = 9_999_999
LENGTH_PET_NAME = 10

_ALPHANUMERIC = string.ascii_letters + string.digits


def gen_pet_id(rng: random.Random) -> int:
    # no uniqueness check: collisions are possible but harmless for positional ops
    return rng.randint(0, MAX_PET_ID)


def gen_pet_name(rng: random.Random, length: int = LENGTH_PET_NAME) -> str:
    return "".join(rng.choice(_ALPHANUMERIC) for _ in range(length))
