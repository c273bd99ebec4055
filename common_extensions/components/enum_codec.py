"""
Enum Codec

Bidirectional conversion between an enumeration's members and their
external representations: integer values, names, description tags and
free-form strings coming from configuration or user input.
"""
import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from common_extensions.components.enum_extensions import (
    get_description,
    has_description_tag,
    require_enum_type,
    to_int,
)
from common_extensions.core.constants import ENUM_CONSTANTS
from common_extensions.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_SEPARATOR_PATTERN = re.compile(f"[{re.escape(ENUM_CONSTANTS.LIST_SEPARATORS)}]")


@dataclass(frozen=True)
class EnumEntry:
    """Static metadata of one enumeration member"""
    member: Enum
    name: str
    description: str
    has_description_tag: bool

    @property
    def int_value(self) -> int:
        return to_int(self.member)


class EnumCodec(Generic[E]):
    """
    Converts between the members of one enumeration type and their names,
    integer values and descriptions (Registry Pattern).

    Member metadata is read once per enumeration type and shared by all
    codecs for that type. Every lookup scans members in declaration order.

    Example:
        >>> codec = EnumCodec(Direction)
        >>> codec.from_description("S")
        <Direction.SOUTH: 1>
        >>> codec.try_from_name("east")
        <Direction.EAST: 2>
    """

    _ENTRY_CACHE: Dict[Type[Enum], List[EnumEntry]] = {}

    def __init__(self, enum_type: Type[E]):
        """
        Initialize codec for an enumeration type

        Args:
            enum_type: The Enum subclass to operate on

        Raises:
            EnumTypeError: If enum_type is not an Enum subclass
        """
        self._enum_type = require_enum_type(enum_type)
        self._entries = self._get_entries(self._enum_type)

    @classmethod
    def _get_entries(cls, enum_type: Type[Enum]) -> List[EnumEntry]:
        entries = cls._ENTRY_CACHE.get(enum_type)
        if entries is None:
            entries = [
                EnumEntry(
                    member=member,
                    name=member.name,
                    description=get_description(member),
                    has_description_tag=has_description_tag(member),
                )
                for member in enum_type
            ]
            cls._ENTRY_CACHE[enum_type] = entries
        return entries

    @property
    def enum_type(self) -> Type[E]:
        """Enumeration type this codec operates on"""
        return self._enum_type

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EnumCodec({self._enum_type.__name__})"

    def count(self) -> int:
        """Number of declared members"""
        return len(self._entries)

    def default_member(self) -> E:
        """
        Get the member used when nothing else matches

        Returns:
            The zero-valued member if one exists, otherwise the first declared
        """
        for entry in self._entries:
            if entry.member.value == 0:
                return entry.member
        return self._entries[0].member

    # ------------------------------------------------------------------
    # Whole-type views
    # ------------------------------------------------------------------

    def to_dictionary_by_value(self) -> Dict[int, str]:
        """
        Convert the enumeration into a dictionary

        Returns:
            Dictionary with keys = integer values and values = member names
        """
        return {entry.int_value: entry.name for entry in self._entries}

    def to_sorted_map_by_name(self) -> "OrderedDict[str, int]":
        """
        Convert the enumeration into a mapping ordered by member name

        Returns:
            OrderedDict with keys = member names (sorted) and values = integer values
        """
        return OrderedDict(
            (entry.name, entry.int_value)
            for entry in sorted(self._entries, key=lambda e: e.name)
        )

    def to_ordered_name_list(self) -> List[str]:
        """Member names sorted lexicographically"""
        return sorted(entry.name for entry in self._entries)

    def to_description_map_by_value(self) -> Dict[int, str]:
        """
        Convert the enumeration into a dictionary of descriptions

        Returns:
            Dictionary with keys = integer values and values = descriptions
            (falling back to the member name)
        """
        return {entry.int_value: entry.description for entry in self._entries}

    def to_description_list(self) -> List[str]:
        """Descriptions of all members in declaration order (unsorted)"""
        return [entry.description for entry in self._entries]

    # ------------------------------------------------------------------
    # Single member lookups
    # ------------------------------------------------------------------

    def from_description(self, text: str, fallback: Optional[E] = None) -> E:
        """
        Get a member from its description tag

        Members carrying a description tag are matched first; when none
        matches, the names of members without a tag are tried.

        Args:
            text: Description to look for (exact match)
            fallback: Member returned when nothing matches (default: zero member)

        Returns:
            The first matching member, or the fallback
        """
        match = self._match_description(text)
        if match is None:
            match = self._match_name(text, ignore_case=False, untagged_only=True)
        if match is not None:
            return match

        logger.debug(f"No {self._enum_type.__name__} member described as {text!r}, using fallback")
        return fallback if fallback is not None else self.default_member()

    def to_description(self, name: str) -> str:
        """
        Get the description of a member from its name

        Args:
            name: Exact member name

        Returns:
            The description tag if present, otherwise the name

        Raises:
            InvalidArgumentError: If the name is not a declared member
        """
        return get_description(self.from_name(name))

    def from_int_value(self, value: int) -> E:
        """
        Get a member from its integer value

        Raises:
            InvalidArgumentError: If no member has that value
        """
        for entry in self._entries:
            if entry.int_value == value:
                return entry.member

        raise InvalidArgumentError(
            "value",
            f"{value!r} is not a declared {self._enum_type.__name__} value",
            value
        )

    def from_name(self, name: str) -> E:
        """
        Get a member from its exact (case sensitive) name

        Raises:
            InvalidArgumentError: If the name is not a declared member
        """
        member = self._enum_type.__members__.get(name) if isinstance(name, str) else None
        if member is None:
            raise InvalidArgumentError(
                "name",
                f"{name!r} is not a declared {self._enum_type.__name__} member",
                name
            )
        return member

    def try_from_name(self, name: str, default: Optional[E] = None) -> Optional[E]:
        """
        Get a member from its name, ignoring case

        Args:
            name: Member name in any case
            default: Value returned when the name matches nothing

        Returns:
            The matching member, or default
        """
        if not isinstance(name, str):
            return default

        match = self._match_name(name.strip(), ignore_case=True)
        return match if match is not None else default

    def parse_to_variants(self, raw: Any) -> List[E]:
        """
        Parse a member or a delimited list of member names

        Tokens are separated by ';' or ',' and empty pieces between
        separators are skipped. Surrounding whitespace is ignored, but a
        token holding only whitespace is an error. Names are matched
        case-insensitively.

        Args:
            raw: A member of this enumeration, or a non-empty string

        Returns:
            Members in token order

        Raises:
            InvalidArgumentError: If raw is empty, not a string, holds no names,
                or any token is blank or does not name a member
        """
        if isinstance(raw, self._enum_type):
            return [raw]

        if not isinstance(raw, str) or raw == "":
            raise InvalidArgumentError(
                "raw",
                f"expected a {self._enum_type.__name__} member or a non-empty string",
                raw
            )

        members = []
        for piece in _SEPARATOR_PATTERN.split(raw):
            if piece == "":
                continue

            token = piece.strip()
            if not token:
                raise InvalidArgumentError(
                    "raw",
                    f"blank {self._enum_type.__name__} name in {raw!r}",
                    raw
                )

            member = self._match_name(token, ignore_case=True)
            if member is None:
                raise InvalidArgumentError(
                    "raw",
                    f"{token!r} is not a declared {self._enum_type.__name__} member",
                    raw
                )
            members.append(member)

        if not members:
            raise InvalidArgumentError("raw", f"no {self._enum_type.__name__} names in {raw!r}", raw)

        return members

    def from_unknown(self, default: E, candidates: Iterable[str]) -> E:
        """
        Resolve the first candidate that matches a description or a name

        Each candidate is tried against all descriptions, then against all
        names (ignoring case), before moving on to the next candidate.

        Args:
            default: Member returned when no candidate matches
            candidates: Strings to try, in order

        Returns:
            The first member matched, or default
        """
        for candidate in candidates:
            if not isinstance(candidate, str):
                continue

            match = self._match_description(candidate)
            if match is None:
                match = self._match_name(candidate, ignore_case=True)
            if match is not None:
                return match

        logger.debug(f"No {self._enum_type.__name__} member matched candidates, using default {default!r}")
        return default

    # ------------------------------------------------------------------
    # Matching helpers
    # ------------------------------------------------------------------

    def _match_description(self, text: str) -> Optional[E]:
        for entry in self._entries:
            if entry.has_description_tag and entry.description == text:
                return entry.member
        return None

    def _match_name(self, text: str, ignore_case: bool, untagged_only: bool = False) -> Optional[E]:
        entries = [e for e in self._entries if not (untagged_only and e.has_description_tag)]
        if not ignore_case:
            for entry in entries:
                if entry.name == text:
                    return entry.member
            return None

        folded = text.casefold()
        for entry in entries:
            if entry.name.casefold() == folded:
                return entry.member
        return None


def parse_to_enum(value: Any, enum_type: Type[E]) -> List[E]:
    """
    Parse a member or a delimited string of names into members of enum_type

    Raises:
        InvalidArgumentError: If value cannot be parsed
    """
    return EnumCodec(enum_type).parse_to_variants(value)
