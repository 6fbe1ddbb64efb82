"""
Main Menu

The menu is the only state the program has. Each pass around the loop
shows the menu, reads a selection and runs the matching action.

DESIGN DECISION: Anything that isn't a menu number ends the session,
including an empty line. There is no "invalid selection, try again".
A typo therefore quits the program just like pressing Enter does.
"""

from enum import Enum
from typing import Optional, Protocol

import structlog

from bill_manager.console import Console
from bill_manager.services.storage import BillStorageInterface


logger = structlog.get_logger(__name__)


class MainMenu(str, Enum):
    """Menu choices, keyed by the number the user types."""
    ADD_BILL = "1"
    VIEW_BILLS = "2"
    REMOVE_BILL = "3"
    UPDATE_BILL = "4"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_str(cls, token: Optional[str]) -> Optional["MainMenu"]:
        """Map a selection token to a menu choice, or None if it isn't one."""
        if token is None:
            return None
        try:
            return cls(token.strip())
        except ValueError:
            return None


_LABELS = {
    MainMenu.ADD_BILL: "Add Bill",
    MainMenu.VIEW_BILLS: "View Bills",
    MainMenu.REMOVE_BILL: "Remove Bill",
    MainMenu.UPDATE_BILL: "Update Bill",
}


class Actions(Protocol):
    def add_bill(self, bills: BillStorageInterface) -> None: ...
    def view_bills(self, bills: BillStorageInterface) -> None: ...
    def remove_bill(self, bills: BillStorageInterface) -> None: ...
    def update_bill(self, bills: BillStorageInterface) -> None: ...


class MenuController:
    """
    Runs the top-level menu loop.

    The bill store is handed in to run() and passed on to each action.
    """

    def __init__(
        self,
        console: Console,
        actions: Actions,
        title: str = "Billing Application",
    ):
        self._console = console
        self._actions = actions
        self._title = title

    def show(self) -> None:
        """Print the banner, the numbered choices and the selection prompt."""
        self._console.write()
        self._console.write(f"--{self._title}--")
        for item in MainMenu:
            self._console.write(f"{item.value}. {item.label}")
        self._console.write()
        self._console.prompt("Enter selection: ")

    def dispatch(self, selection: MainMenu, bills: BillStorageInterface) -> None:
        handlers = {
            MainMenu.ADD_BILL: self._actions.add_bill,
            MainMenu.VIEW_BILLS: self._actions.view_bills,
            MainMenu.REMOVE_BILL: self._actions.remove_bill,
            MainMenu.UPDATE_BILL: self._actions.update_bill,
        }
        handlers[selection](bills)

    def run(self, bills: BillStorageInterface) -> None:
        """
        Loop until the user enters something that isn't a menu number.

        Raises:
            InputStreamError: If stdin goes away mid-session
        """
        while True:
            self.show()
            token = self._console.get_input()
            selection = MainMenu.from_str(token)
            if selection is None:
                logger.info("menu_exit", selection=token)
                return
            logger.debug("menu_selected", selection=selection.name)
            self.dispatch(selection, bills)
