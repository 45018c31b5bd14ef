"""
Respondent id generators.

Zero-argument callables that hand out a fresh respondent id on every call,
for bulk ingestion where the caller only knows rating quantities.
"""

import config.settings as settings


class SequentialIdGenerator:
    """
    Produces start, start + step, start + 2 * step, ...
    """

    def __init__(self, start: int = settings.AUTO_ID_START, step: int = 1):
        if step == 0:
            raise ValueError("step must be non-zero")
        self._next = start
        self.step = step

    def __call__(self) -> int:
        current = self._next
        self._next += self.step
        return current


class PrefixedIdGenerator:
    """
    Produces string ids such as "customer_1", "customer_2", ...
    """

    def __init__(self, prefix: str = settings.DEFAULT_ID_PREFIX, start: int = 1):
        self.prefix = prefix
        self._counter = SequentialIdGenerator(start=start)

    def __call__(self) -> str:
        return f"{self.prefix}{self._counter()}"
