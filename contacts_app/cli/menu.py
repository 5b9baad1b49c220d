"""
Interactive menu driving a contact directory.

The menu only collects text and renders results. Names and phones are
passed to the directory exactly as typed; all rules about validity,
duplicates and capacity live in the directory itself.
"""

import sys
from typing import Any, Callable, Optional, TextIO

from ..config.defaults import DEFAULT_CAPACITY
from ..directory import AddResult, Directory, Entry, create_directory
from ..errors import InvalidCapacityError, InvalidChoiceError
from ..logging.config import get_logger

logger = get_logger(__name__)

MENU = """\
============ MENU ============
  1. Add contact
  2. Check if a contact exists
  3. List all contacts
  4. Find contact by name
  5. Remove contact
  6. Update phone number
  7. Check if directory is full
  8. Show free slots
  0. Exit
=============================="""

ADD_MESSAGES = {
    AddResult.ADDED: "Contact added.",
    AddResult.MISSING: "Error: no contact given.",
    AddResult.INVALID: "Error: first and last name cannot be empty.",
    AddResult.FULL: "Error: the directory is full, no more contacts can be added.",
    AddResult.DUPLICATE: "Error: a contact with that first and last name already exists.",
}


def parse_int(raw: str) -> Optional[int]:
    """Parse operator input as an integer, None if it is not one."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


class MenuSession:
    """Reads commands from the operator and runs them against a directory."""

    def __init__(
        self,
        directory: Directory,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None
    ) -> None:
        self.directory = directory
        self.input_func = input_func or input
        self.output = output or sys.stdout
        self.logger = logger

        self.commands: dict[int, Callable[[], None]] = {
            1: self.add_entry,
            2: self.check_exists,
            3: self.list_all,
            4: self.find_by_name,
            5: self.remove_entry,
            6: self.update_phone,
            7: self.show_is_full,
            8: self.show_free_slots,
        }

    def say(self, text: str = "") -> None:
        print(text, file=self.output)

    def ask(self, prompt: str) -> str:
        return self.input_func(prompt)

    def read_choice(self) -> int:
        """Prompt for a menu option, raising InvalidChoiceError on non-numeric input."""
        raw = self.ask("Select an option: ")
        choice = parse_int(raw)
        if choice is None:
            raise InvalidChoiceError("Menu option must be a number", raw_value=raw)
        return choice

    def run(self) -> None:
        """Loop until the operator exits or input runs out."""
        self.logger.info("Menu session started", capacity=self.directory.capacity)

        while True:
            self.say(MENU)
            try:
                if not self.handle(self.read_choice()):
                    break
            except InvalidChoiceError as e:
                self.logger.info("Invalid menu input", raw_value=e.raw_value)
                self.say("Invalid option. Please try again.")
            except EOFError:
                self.say()
                self.say_goodbye()
                break
            self.say()

        self.logger.info("Menu session ended", size=self.directory.size())

    def handle(self, choice: int) -> bool:
        """Run one command. Returns False when the session should end."""
        if choice == 0:
            self.say_goodbye()
            return False

        command = self.commands.get(choice)
        if command is None:
            self.say("Invalid option. Please try again.")
        else:
            command()
        return True

    def say_goodbye(self) -> None:
        self.say("Thank you for using the contact directory. Goodbye!")

    def _ask_names(self) -> tuple[str, str]:
        first_name = self.ask("First name: ")
        last_name = self.ask("Last name: ")
        return first_name, last_name

    def add_entry(self) -> None:
        self.say("\n--- ADD CONTACT ---")
        first_name, last_name = self._ask_names()
        phone = self.ask("Phone: ")

        result = self.directory.try_add(Entry(first_name, last_name, phone))
        self.say(ADD_MESSAGES[result])

    def check_exists(self) -> None:
        self.say("\n--- CHECK CONTACT ---")
        first_name, last_name = self._ask_names()

        if self.directory.exists(Entry(first_name, last_name, "")):
            self.say(f"✓ {first_name} {last_name} is in the directory.")
        else:
            self.say(f"✗ {first_name} {last_name} is not in the directory.")

    def list_all(self) -> None:
        entries = self.directory.list_entries()
        if not entries:
            self.say("The directory is empty.")
            return

        self.say("\n========== CONTACTS ==========")
        for position, entry in enumerate(entries, start=1):
            self.say(f"{position}. {entry.render()}")
        self.say("==============================")

    def find_by_name(self) -> None:
        self.say("\n--- FIND CONTACT ---")
        first_name, last_name = self._ask_names()

        entry = self.directory.find_by_name(first_name, last_name)
        if entry is None:
            self.say("No contact found with that first and last name.")
            return

        self.say("Contact found:")
        self.say(f"First name: {entry.first_name}")
        self.say(f"Last name: {entry.last_name}")
        self.say(f"Phone: {entry.phone}")

    def remove_entry(self) -> None:
        self.say("\n--- REMOVE CONTACT ---")
        first_name, last_name = self._ask_names()

        if self.directory.remove(Entry(first_name, last_name, "")):
            self.say("Contact removed.")
        else:
            self.say("Error: contact to remove was not found.")

    def update_phone(self) -> None:
        self.say("\n--- UPDATE PHONE ---")
        first_name, last_name = self._ask_names()
        new_phone = self.ask("New phone: ")

        if self.directory.update_phone(first_name, last_name, new_phone):
            self.say(f"Phone updated. New phone for {first_name} {last_name}: {new_phone}")
        else:
            self.say("Error: no contact found with that first and last name.")

    def show_is_full(self) -> None:
        if self.directory.is_full():
            self.say("⚠ The directory is FULL.")
        else:
            self.say("✓ The directory is NOT full.")

    def show_free_slots(self) -> None:
        stats = self.directory.stats()
        self.say("\n========== DIRECTORY INFO ==========")
        self.say(f"Capacity: {stats.capacity}")
        self.say(f"Contacts: {stats.size}")
        self.say(f"Free slots: {stats.free_slots}")
        if stats.is_full:
            self.say("⚠ The directory is full. There is no room for new contacts.")
        else:
            self.say(f"✓ You can add {stats.free_slots} more contact(s).")
        self.say("====================================")


def read_capacity(raw: str, default: int) -> int:
    """Parse a capacity typed by the operator, raising InvalidCapacityError if it is not a number."""
    capacity = parse_int(raw)
    if capacity is None:
        raise InvalidCapacityError(
            "Capacity must be a number",
            raw_value=raw,
            fallback_capacity=default
        )
    return capacity


def choose_directory(
    input_func: Optional[Callable[[str], str]] = None,
    output: Optional[TextIO] = None,
    config: Optional[dict[str, Any]] = None
) -> Directory:
    """Ask the operator how to size the directory and build it."""
    input_func = input_func or input
    output = output or sys.stdout
    default = (config or {}).get("directory", {}).get("default_capacity", DEFAULT_CAPACITY)

    print("How do you want to create the directory?", file=output)
    print("1. With a custom size", file=output)
    print(f"2. With the default size ({default} contacts)", file=output)

    try:
        option = parse_int(input_func("Select an option: "))
        if option != 1:
            print(f"Directory created with the default size ({default} contacts).", file=output)
            return create_directory(None, config)

        requested = read_capacity(input_func("Maximum number of contacts: "), default)
    except InvalidCapacityError as e:
        logger.info("Invalid capacity input", raw_value=e.raw_value)
        print(f"Invalid size. Using the default size ({default}).", file=output)
        return create_directory(None, config)
    except EOFError:
        return create_directory(None, config)

    if requested <= 0:
        print(f"Invalid size. Using the default size ({default}).", file=output)

    return create_directory(requested, config)
