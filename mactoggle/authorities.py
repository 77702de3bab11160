"""
# Mac-Toggle: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the rewriting logic.
"""

from mactoggle.bases import Replacement
from mactoggle.employables import MarkerTableReplacement


class ReplacementAuthority:
    """
    Object governing the construction and application of replacement rules.

    ## `legislate`

    Builds a committed MarkerTableReplacement from a table of substitutions
    and appends it to the replacement queue.

    ## `execute`

    Applies the legislated replacements, in queue order.
    """
    _replacement_from_id: dict[str, 'Replacement']
    _replacement_queue: list['Replacement']
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool):
        self._replacement_from_id = {}
        self._replacement_queue = []
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def replacement_queue(self) -> list['Replacement']:
        return list(self._replacement_queue)

    def legislate(self, substitute_from_tag: dict[str, str], id_: str,
                  apply_substitutions_simultaneously: bool = False) -> 'MarkerTableReplacement':
        if id_ in self._replacement_from_id:
            raise ValueError(f'error: replacement with id `{id_}` already legislated')

        replacement = MarkerTableReplacement(id_, self._verbose_mode_enabled)
        replacement.apply_substitutions_simultaneously = apply_substitutions_simultaneously
        for tag, substitute in substitute_from_tag.items():
            replacement.add_substitution(tag, substitute)
        replacement.commit()

        self._replacement_from_id[id_] = replacement
        self._replacement_queue.append(replacement)

        return replacement

    def execute(self, string: str) -> str:
        for replacement in self._replacement_queue:
            string = replacement.apply(string)

        return string
