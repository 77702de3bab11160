"""
# Mac-Toggle: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for marker replacement rules.
"""

import abc

from mactoggle.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from mactoggle.exceptions import CommittedMutateException, UncommittedApplyException


class Replacement(abc.ABC):
    """
    Base class for a replacement rule.

    A replacement rule is built in two stages.
    First its attributes are set; then `commit()` validates them and prepares whatever `_apply(string)` needs
    (typically a compiled regex). After `commit()` the rule is frozen, and only then may it be applied.
    """
    _is_committed: bool
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        self._is_committed = False
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    def commit(self):
        self._validate_mandatory_attributes()
        self._set_apply_method_variables()
        self._is_committed = True

    def apply(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `apply(string)` before `commit()`')

        string_before = string
        string = self._apply(string)
        string_after = string

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
            print(string_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(string_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
            print('\n\n\n\n')

        return string_after

    @abc.abstractmethod
    def _validate_mandatory_attributes(self):
        """
        Ensure all mandatory attributes have been set.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _set_apply_method_variables(self):
        """
        Set variables used in `self._apply(string)`.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _apply(self, string: str) -> str:
        """
        Apply the defined replacement to a string.
        """
        raise NotImplementedError


class ReplacementWithSubstitutions(Replacement, abc.ABC):
    """
    Base class for a replacement rule with marker substitutions.

    Each substitution maps a marker tag to the fixed string
    that a delimited occurrence of the tag is to be replaced with.
    Substitutions are kept in the order they were added.
    """
    _substitute_from_tag: dict[str, str]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._substitute_from_tag = {}

    @property
    def substitute_from_tag(self) -> dict[str, str]:
        return dict(self._substitute_from_tag)

    def add_substitution(self, tag: str, substitute: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `add_substitution(...)` after `commit()`')

        self._substitute_from_tag[tag] = substitute
