"""
Interactive prompts for the seeder
"""
from enum import IntEnum
from typing import Callable, Type, TypeVar

from pzem_seeder.exceptions import InputError
from pzem_seeder.series_generator import EnergyMode

E = TypeVar('E', bound=IntEnum)

MODE_PROMPT = "Do you want to generate normal energy values (1) or greater energy values (2)? "
ACTION_PROMPT = "Do you want to insert or delete records? (1 for insert, 2 for delete): "


class StorageAction(IntEnum):
    INSERT = 1
    DELETE = 2


def parse_choice(answer: str, enum_cls: Type[E]) -> E:
    """
    Turn a typed answer into one of the enum's members

    Args:
        answer: Raw text from the prompt
        enum_cls: IntEnum whose values are the allowed codes

    Returns:
        Matching enum member

    Raises:
        InputError: If the answer is not a number or not an allowed code
    """
    text = (answer or '').strip()
    allowed = ', '.join(str(member.value) for member in enum_cls)
    try:
        code = int(text)
    except ValueError:
        raise InputError(f"Expected a number ({allowed}), got {text!r}") from None

    try:
        return enum_cls(code)
    except ValueError:
        raise InputError(f"Choice {code} is not one of {allowed}") from None


def ask_energy_mode(input_func: Callable[[str], str] = input) -> EnergyMode:
    return parse_choice(input_func(MODE_PROMPT), EnergyMode)


def ask_action(input_func: Callable[[str], str] = input) -> StorageAction:
    return parse_choice(input_func(ACTION_PROMPT), StorageAction)
