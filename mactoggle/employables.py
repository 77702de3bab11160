"""
# Mac-Toggle: employables.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Classes for marker replacement rules that are actually employed by the rewriter.
"""

import re
from typing import Callable, Optional

from mactoggle.bases import Replacement, ReplacementWithSubstitutions
from mactoggle.exceptions import CommittedMutateException, MissingAttributeException
from mactoggle.idioms import build_marker_regex


class MarkerReplacement(Replacement):
    """
    A replacement rule for a single marker kind.

    Every delimited occurrence of «tag», that is,
            «mandatory delimiter run» «tag» «optional delimiter run»
    is replaced with «substitute» in one global pass.
    """
    _tag: Optional[str]
    _substitute: Optional[str]
    _regex_pattern_compiled: Optional[re.Pattern]
    _substitute_function: Optional[Callable[[re.Match], str]]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._tag = None
        self._substitute = None
        self._regex_pattern_compiled = None
        self._substitute_function = None

    @property
    def tag(self) -> Optional[str]:
        return self._tag

    @tag.setter
    def tag(self, value: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `tag` after `commit()`')

        self._tag = value

    @property
    def substitute(self) -> Optional[str]:
        return self._substitute

    @substitute.setter
    def substitute(self, value: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `substitute` after `commit()`')

        self._substitute = value

    def _validate_mandatory_attributes(self):
        if self._tag is None:
            raise MissingAttributeException('tag')

        if self._substitute is None:
            raise MissingAttributeException('substitute')

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=build_marker_regex([self._tag]),
            flags=re.VERBOSE,
        )
        self._substitute_function = self.build_substitute_function(self._substitute)

    def _apply(self, string: str) -> str:
        return re.sub(
            pattern=self._regex_pattern_compiled,
            repl=self._substitute_function,
            string=string,
        )

    @staticmethod
    def build_substitute_function(substitute: str) -> Callable[[re.Match], str]:
        def substitute_function(_: re.Match) -> str:
            return substitute

        return substitute_function


class MarkerTableReplacement(ReplacementWithSubstitutions, Replacement):
    """
    A replacement rule for a whole table of marker kinds.

    By default the substitutions are applied sequentially, in the order they were added,
    each as a MarkerReplacement making a full pass over the result of the one before.

    With `apply_substitutions_simultaneously`, all tags are matched by a single alternation regex
    in one global pass, and each occurrence is replaced with the substitute for its own tag.

    The two modes agree unless marker occurrences are glued together by delimiter characters,
    e.g. `/END-MAC/ELSE-IF-MAC`, where the `*/` substituted for `END-MAC`
    becomes the leading delimiter run of `ELSE-IF-MAC` in a later sequential pass.
    """
    _apply_substitutions_simultaneously: bool
    _simultaneous_regex_pattern_compiled: Optional[re.Pattern]
    _simultaneous_substitute_function: Optional[Callable[[re.Match], str]]
    _sequential_replacements: list['MarkerReplacement']

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._apply_substitutions_simultaneously = False
        self._simultaneous_regex_pattern_compiled = None
        self._simultaneous_substitute_function = None
        self._sequential_replacements = []

    @property
    def apply_substitutions_simultaneously(self) -> bool:
        return self._apply_substitutions_simultaneously

    @apply_substitutions_simultaneously.setter
    def apply_substitutions_simultaneously(self, value: bool):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `apply_substitutions_simultaneously` after `commit()`')

        self._apply_substitutions_simultaneously = value

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        if self._apply_substitutions_simultaneously:
            self.set_simultaneous_apply_method_variables()
        else:
            self.set_sequential_apply_method_variables()

    def _apply(self, string: str) -> str:
        if self._apply_substitutions_simultaneously:
            return self.simultaneous_apply(string)
        else:
            return self.sequential_apply(string)

    def set_simultaneous_apply_method_variables(self):
        if len(self._substitute_from_tag) > 0:
            self._simultaneous_regex_pattern_compiled = re.compile(
                pattern=build_marker_regex(self._substitute_from_tag),
                flags=re.VERBOSE,
            )
        self._simultaneous_substitute_function = (
            MarkerTableReplacement.build_simultaneous_substitute_function(self._substitute_from_tag)
        )

    def set_sequential_apply_method_variables(self):
        for tag, substitute in self._substitute_from_tag.items():
            marker_replacement = MarkerReplacement(f'{self._id}.{tag}', self._verbose_mode_enabled)
            marker_replacement.tag = tag
            marker_replacement.substitute = substitute
            marker_replacement.commit()
            self._sequential_replacements.append(marker_replacement)

    @staticmethod
    def build_simultaneous_substitute_function(substitute_from_tag: dict[str, str]) -> Callable[[re.Match], str]:
        substitute_from_tag = dict(substitute_from_tag)

        def substitute_function(match: re.Match) -> str:
            return substitute_from_tag[match.group('tag')]

        return substitute_function

    def simultaneous_apply(self, string: str) -> str:
        if len(self._substitute_from_tag) > 0:
            string = re.sub(
                pattern=self._simultaneous_regex_pattern_compiled,
                repl=self._simultaneous_substitute_function,
                string=string,
            )

        return string

    def sequential_apply(self, string: str) -> str:
        for marker_replacement in self._sequential_replacements:
            string = marker_replacement.apply(string)

        return string
