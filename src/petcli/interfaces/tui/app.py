import random
from collections.abc import Callable

from result import Err, Ok

from petcli.core.models import Pet
from petcli.core.ops import index_after_removal, next_index, prev_index, random_pet
from petcli.interfaces.tui.data import AppState, Event, KeyEvent, TickEvent
from petcli.interfaces.tui.style import (
    KEYS_ADD,
    KEYS_DELETE,
    KEYS_HOME,
    KEYS_NEXT,
    KEYS_PETS,
    KEYS_PREV,
    KEYS_QUIT,
)
from petcli.storage import Store
from petcli.util.logger import setup_logger

logger = setup_logger("petcli", is_stream=False, is_file=True)


class App:
    """Event dispatcher: the only place where AppState and the store are mutated."""

    def __init__(
        self,
        store: Store,
        state: AppState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.state = state or AppState()
        self.rng = rng or random.Random()

    def snapshot(self) -> list[Pet]:
        """Read the pets for one frame. Read errors are shown and render as an empty list."""
        match self.store.get_all_pets():
            case Ok(pets):
                return pets  # type: ignore[no-any-return]
            case Err(e):
                self.state.msg_footer = f"Error (read): {e}"
                return []
            case _:
                return []

    def handle_event(self, event: Event) -> bool:
        # True を返したら継続、False ならループ終了
        match event:
            case TickEvent():
                # nothing changes; the caller redraws
                return True
            case KeyEvent(code=code):
                return self.handle_key(code)
        return True

    def handle_key(self, key: int) -> bool:
        self.state.msg_footer = None

        if key in KEYS_QUIT:
            return False
        if key in KEYS_HOME:
            self.state.active_view = "home"
        elif key in KEYS_PETS:
            self.state.active_view = "pets"
        elif key in KEYS_ADD:
            self._add_random_pet()
        elif key in KEYS_DELETE:
            self._remove_selected_pet()
        elif key in KEYS_NEXT:
            self._move_selection(next_index)
        elif key in KEYS_PREV:
            self._move_selection(prev_index)
        return True

    # ---- small helpers --------------------------------------------------

    def _count_pets(self) -> int | None:
        match self.store.get_all_pets():
            case Ok(pets):
                return len(pets)
            case Err(e):
                self.state.msg_footer = f"Error (read): {e}"
                return None
            case _:
                return None

    def _add_random_pet(self) -> None:
        pet = random_pet(self.rng)
        match self.store.add_pet(pet):
            case Ok(_):
                logger.info(f"Added pet: id={pet.id} name={pet.name}")
                self.state.msg_footer = f"Added: {pet.name}"
            case Err(e):
                logger.error(f"Error (add): {e}")
                self.state.msg_footer = f"Error (add): {e}"

    def _remove_selected_pet(self) -> None:
        selected = self.state.selected_index
        if selected is None:
            return
        match self.store.get_all_pets():
            case Ok(pets):
                if not pets:
                    return
                name = pets[selected].name if selected < len(pets) else None
            case Err(e):
                self.state.msg_footer = f"Error (delete): {e}"
                return
            case _:
                return

        match self.store.remove_pet_at(selected):
            case Ok(None):
                logger.info(f"Removed pet at {selected}: name={name}")
                self.state.selected_index = index_after_removal(selected)
                self.state.msg_footer = f"Deleted: {name}"
            case Err(e):
                logger.error(f"Error (delete): {e}")
                self.state.msg_footer = f"Error (delete): {e}"

    def _move_selection(self, move: Callable[[int | None, int], int | None]) -> None:
        count = self._count_pets()
        if count is None:
            return
        self.state.selected_index = move(self.state.selected_index, count)
