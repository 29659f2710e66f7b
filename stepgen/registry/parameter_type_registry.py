"""
stepgen/registry/parameter_type_registry.py

In-memory registry of parameter types.

Contains:
- ParameterTypeRegistry: register(), lookups by name and by regexp,
  and the snippet-eligible view consumed by the expression generator
"""

import re
import threading
from collections import defaultdict
from collections.abc import Iterable, Iterator

from stepgen.data_models.parameter_type import ParameterType
from stepgen.utils.exceptions import (
    AmbiguousParameterTypeError,
    NameCollisionError,
    ParameterTypeNotFoundError,
)
from stepgen.utils.logger import get_logger

logger = get_logger(name=__name__)


class ParameterTypeRegistry:
    """
    Holds parameter types keyed by name, in registration order.

    Registration is serialized with a lock. Parameter types are immutable, so
    list reads only take a snapshot of the current entries, and lookups by name
    (lookup_by_type_name, get_by_type_name, `in`) read the name index without
    the lock; they are safe once registration has quiesced. Types with name None are
    kept but not keyed, so any number of them may be registered.
    """

    def __init__(self, parameter_types: Iterable[ParameterType] = ()) -> None:
        self._lock = threading.Lock()
        self._parameter_types: list[ParameterType] = []
        self._parameter_types_by_name: dict[str, ParameterType] = {}
        self._parameter_types_by_regexp: dict[str, list[ParameterType]] = defaultdict(list)
        for parameter_type in parameter_types:
            self.register(parameter_type)

    def __len__(self) -> int:
        return len(self._parameter_types)

    def __contains__(self, name: object) -> bool:
        return name in self._parameter_types_by_name

    @property
    def parameter_types(self) -> list[ParameterType]:
        """All registered parameter types in registration order."""
        with self._lock:
            return list(self._parameter_types)

    def register(self, parameter_type: ParameterType) -> None:
        """
        Add a parameter type.

        Args:
            parameter_type: The parameter type to add.

        Raises:
            NameCollisionError: If a parameter type with the same name exists.
                The existing entry is left in place.
        """
        with self._lock:
            name = parameter_type.name
            if name is not None:
                if name in self._parameter_types_by_name:
                    logger.warning("Rejected duplicate parameter type name %r", name)
                    raise NameCollisionError(
                        f"There is already a parameter type with name {name!r}"
                    )
                self._parameter_types_by_name[name] = parameter_type
            self._parameter_types.append(parameter_type)
            for regexp in parameter_type.regexps:
                self._parameter_types_by_regexp[regexp].append(parameter_type)
        logger.debug(
            "Registered parameter type %r with regexps %s (use_for_snippets=%s)",
            name, list(parameter_type.regexps), parameter_type.use_for_snippets,
        )

    def lookup_by_type_name(self, name: str) -> ParameterType | None:
        """Return the parameter type with this name, or None."""
        return self._parameter_types_by_name.get(name)

    def get_by_type_name(self, name: str) -> ParameterType:
        """
        Return the parameter type with this name.

        Raises:
            ParameterTypeNotFoundError: If no parameter type has this name.
        """
        parameter_type = self.lookup_by_type_name(name)
        if parameter_type is None:
            raise ParameterTypeNotFoundError(f"Undefined parameter type {{{name}}}")
        return parameter_type

    def lookup_by_regexp(self, regexp: str | re.Pattern[str]) -> ParameterType | None:
        """
        Return the parameter type owning a regexp source.

        When several types share the regexp, the single preferential one wins.

        Args:
            regexp: Regexp source string or compiled pattern.

        Returns:
            The owning parameter type, or None if no type uses this regexp.

        Raises:
            AmbiguousParameterTypeError: If several types share the regexp and
                not exactly one of them is preferential.
        """
        source = regexp.pattern if isinstance(regexp, re.Pattern) else regexp
        with self._lock:
            candidates = list(self._parameter_types_by_regexp.get(source, ()))
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        preferential = [pt for pt in candidates if pt.prefer_for_regexp_match]
        if len(preferential) == 1:
            return preferential[0]

        names = sorted(pt.name or "" for pt in (preferential or candidates))
        raise AmbiguousParameterTypeError(
            f"Regexp {source!r} matches parameter types {names}; "
            "mark exactly one of them with prefer_for_regexp_match"
        )

    def parameter_types_eligible_for_snippets(self) -> Iterator[ParameterType]:
        """Lazily yield parameter types with use_for_snippets=True, in registration order."""
        for parameter_type in self.parameter_types:
            if parameter_type.use_for_snippets:
                yield parameter_type
