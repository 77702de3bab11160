"""
# Mac-Toggle: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CommittedMutateException(Exception):
    pass


class MissingAttributeException(Exception):
    _missing_attribute: str

    def __init__(self, missing_attribute: str):
        super().__init__(f'error: mandatory attribute `{missing_attribute}` not set')
        self._missing_attribute = missing_attribute

    @property
    def missing_attribute(self) -> str:
        return self._missing_attribute


class UncommittedApplyException(Exception):
    pass


class UnbalancedMarkerException(Exception):
    _imbalances: list['MarkerImbalance']

    def __init__(self, imbalances: list['MarkerImbalance']):
        super().__init__('; '.join(f'line {imbalance.line_number}: {imbalance.message}' for imbalance in imbalances))
        self._imbalances = imbalances

    @property
    def imbalances(self) -> list['MarkerImbalance']:
        return self._imbalances
