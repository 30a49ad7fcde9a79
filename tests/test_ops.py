import random
import unittest

from petcli.core import ops
from petcli.core.models import CATEGORIES
from petcli.util.ids import LENGTH_PET_NAME, MAX_PET_ID


class TestSelectionWrap(unittest.TestCase):
    """選択カーソルの折り返しのテスト"""

    def test_next_then_prev_is_identity(self) -> None:
        for count in range(1, 7):
            for i in range(count):
                with self.subTest(count=count, i=i):
                    assert ops.prev_index(ops.next_index(i, count), count) == i
                    assert ops.next_index(ops.prev_index(i, count), count) == i

    def test_next_wraps_to_first(self) -> None:
        assert ops.next_index(0, 3) == 1
        assert ops.next_index(1, 3) == 2
        assert ops.next_index(2, 3) == 0

    def test_prev_wraps_to_last(self) -> None:
        assert ops.prev_index(0, 3) == 2
        assert ops.prev_index(2, 3) == 1

    def test_empty_is_noop(self) -> None:
        assert ops.next_index(0, 0) == 0
        assert ops.prev_index(0, 0) == 0

    def test_no_selection_is_noop(self) -> None:
        assert ops.next_index(None, 3) is None
        assert ops.prev_index(None, 3) is None

    def test_stale_selection_is_clamped(self) -> None:
        # the list shrank behind our back
        assert ops.next_index(9, 3) == 0
        assert ops.prev_index(9, 3) == 1

    def test_index_after_removal(self) -> None:
        assert ops.index_after_removal(0) == 0
        assert ops.index_after_removal(1) == 0
        assert ops.index_after_removal(5) == 4


class TestRandomPet(unittest.TestCase):
    def test_fields_are_in_range(self) -> None:
        rng = random.Random(1234)
        for _ in range(200):
            pet = ops.random_pet(rng)
            assert 0 <= pet.id <= MAX_PET_ID
            assert len(pet.name) == LENGTH_PET_NAME
            assert pet.name.isalnum()
            assert pet.category in CATEGORIES
            assert ops.MIN_PET_AGE <= pet.age <= ops.MAX_PET_AGE
            assert pet.created_at.tzinfo is not None

    def test_both_categories_show_up(self) -> None:
        rng = random.Random(0)
        categories = {ops.random_pet(rng).category for _ in range(100)}
        assert categories == set(CATEGORIES)

    def test_seeded_rng_is_reproducible(self) -> None:
        a = ops.random_pet(random.Random(7))
        b = ops.random_pet(random.Random(7))
        assert (a.id, a.name, a.category, a.age) == (b.id, b.name, b.category, b.age)


if __name__ == "__main__":
    unittest.main()
